import datetime
import enum
import uuid
from decimal import Decimal

import pytest

from urlvaluer.cast import to_string
from urlvaluer.errors import CastError


class Color(enum.Enum):
    RED = "red"
    LEVEL = 3


class Version:
    def string(self):
        return "v1"


@pytest.mark.parametrize("value, expected", [
    ("hello", "hello"),
    (True, "true"),
    (False, "false"),
    (0, "0"),
    (-17, "-17"),
    (1.2, "1.2"),
    (1.0, "1"),
    (1e20, "100000000000000000000"),
    (1.5e-07, "0.00000015"),
    (float("inf"), "+Inf"),
    (Decimal("12.50"), "12.50"),
    (b"raw", "raw"),
    (None, ""),
    (Color.RED, "red"),
    (Color.LEVEL, "3"),
    (datetime.date(2024, 2, 29), "2024-02-29"),
    (datetime.datetime(2024, 2, 29, 8, 30), "2024-02-29T08:30:00"),
    (uuid.UUID(int=1), "00000000-0000-0000-0000-000000000001"),
    (Version(), "v1"),
    (ValueError("boom"), "boom"),
])
def test_to_string(value, expected):
    assert to_string(value) == expected


@pytest.mark.parametrize("value", [[1, 2], {"a": 1}, (1,), object(), b"\xff\xfe"])
def test_to_string_rejects(value):
    with pytest.raises(CastError) as exc:
        to_string(value)
    assert "unable to cast" in str(exc.value)
