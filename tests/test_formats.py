import dataclasses

import pytest

from icnskit.core import magic
from icnskit.formats import FormatType, IcnsFormat

FORMAT_ABCD = IcnsFormat(magic("a", "b", "c", "d"), "abcd", "abcd.png", FormatType.PNG, 128, 128, 1, 0x1000)
FORMAT_ABCE = IcnsFormat(magic("A", "B", "C", "E"), "ABCE", "ABCE.png", FormatType.PNG, 16, 16, 1, 0x1000)
FORMAT_BAAD = IcnsFormat(magic("B", "a", "a", "d"), "Baad", "Baad.png", FormatType.PNG, 16, 16, 2, 0x1000)
FORMAT_D00D = IcnsFormat(magic("d", "0", "0", "d"), "d00d", "d00d.png", FormatType.PNG, 128, 128, 2, 0x1000)

ALL_FORMATS = [FORMAT_ABCD, FORMAT_ABCE, FORMAT_BAAD, FORMAT_D00D]


def test_real_dimensions_without_factor_equal_nominal():
    assert FORMAT_ABCE.real_width == FORMAT_ABCE.width
    assert FORMAT_ABCE.real_height == FORMAT_ABCE.height


def test_real_dimensions_double_for_retina():
    assert FORMAT_BAAD.real_width == 2 * FORMAT_ABCE.real_width
    assert FORMAT_D00D.real_height == 2 * FORMAT_ABCD.real_height


@pytest.mark.parametrize(
    "code, width, height, factor, real_width, real_height",
    [
        ("abcd", 128, 128, 1, 128, 128),
        ("ABCE", 16, 16, 1, 16, 16),
        ("Baad", 16, 16, 2, 32, 32),
        ("d00d", 128, 128, 2, 256, 256),
        ("wide", 32, 16, 2, 64, 32),
    ],
)
def test_real_dimensions_scale_with_factor(code, width, height, factor, real_width, real_height):
    fmt = IcnsFormat(magic(*code), code, None, FormatType.PNG, width, height, factor, 0x1000)
    assert fmt.real_width == real_width
    assert fmt.real_height == real_height


@pytest.mark.parametrize("code", ["abcd", "ABCE", "Baad", "d00d"])
def test_magic_name_matches_name(code):
    fmt = IcnsFormat(magic(*code), code, f"{code}.png", FormatType.PNG, 16, 16, 1, 0x1000)
    assert fmt.magic_name == code


def test_defaults():
    fmt = IcnsFormat(magic("t", "e", "s", "t"), "test", None, FormatType.UNKNOWN, 32, 32)
    assert fmt.factor == 1
    assert fmt.real_width == fmt.width


def test_formats_are_immutable():
    fmt = IcnsFormat(magic("a", "b", "c", "d"), "abcd", "abcd.png", FormatType.PNG, 128, 128, 1, 0x1000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        fmt.width = 64
    assert fmt.width == 128
    assert fmt.real_width == 128


def test_distinct_formats_are_distinct_keys():
    assert len(set(ALL_FORMATS)) == len(ALL_FORMATS)