import pytest

from cloudinary_kit.core.numbers import format_number, truncate
from cloudinary_kit.core.utils import join_tokens


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, "5"),
        (2.0, "2.0"),
        (1.5, "1.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e-07, "0.0000001"),
        (1e16, "10000000000000000.0"),
        (-3.25, "-3.25"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_truncate_drops_fraction_toward_zero():
    assert truncate(300.9) == "300"
    assert truncate(-2.7) == "-2"
    assert truncate(640) == "640"


def test_join_tokens_skips_empty_parts():
    assert join_tokens(["", "a", "", "b"], sep="/") == "a/b"
    assert join_tokens(["", ""]) == ""
