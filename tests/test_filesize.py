import pytest

from jylib.filesize import format_file_size

UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]


def test_zero():
    assert format_file_size(0) == "0 B"


def test_small_sizes_are_plain_bytes():
    assert format_file_size(1023).endswith(" B")
    assert format_file_size(1023).startswith("1023")


def test_kilobyte():
    assert format_file_size(1024) == "1.00 KB"


def test_fractional_kilobytes():
    assert format_file_size(1536) == "1.50 KB"


@pytest.mark.parametrize("power", range(1, 7))
def test_exact_powers_use_matching_unit(power):
    assert format_file_size(1024**power) == f"1.00 {UNITS[power]}"


def test_largest_unit_is_capped():
    assert format_file_size(1024**7).endswith(" EB")


def test_negative_is_plain_bytes():
    assert format_file_size(-5).endswith(" B")