"""Unit tests for assdialog.timing (centisecond arithmetic and retiming)."""

from fractions import Fraction

import pytest

from assdialog.timing import (
    IDENTITY,
    Timestamp,
    compute_ratio,
    format_timestamp,
    from_centis,
    parse_frame_rate,
    rescale,
    to_centis,
)


class TestCentis:
    def test_to_centis(self):
        assert to_centis(0, 1, 2, 50) == 6250
        assert to_centis(1, 0, 0, 0) == 360000

    def test_from_centis(self):
        assert from_centis(6250) == (0, 1, 2, 50)
        assert from_centis(0) == (0, 0, 0, 0)

    def test_round_trip_normalises_overflowing_fields(self):
        """1:75:80.05 is 2:16:20.05 once minutes and seconds are carried."""
        assert from_centis(to_centis(1, 75, 80, 5)) == (2, 16, 20, 5)

    def test_round_trip_canonical(self):
        assert from_centis(to_centis(3, 59, 59, 99)) == (3, 59, 59, 99)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            from_centis(-1)


class TestRescale:
    def test_frame_rate_example(self):
        """3600cs at 24 -> 25 fps is exactly 3456cs (0:00:34.56)."""
        total = rescale(3600, compute_ratio(24, 25))
        assert total == 3456
        assert format_timestamp(*from_centis(total)) == "0:00:34.56"

    def test_truncates_fractional_centiseconds(self):
        assert rescale(99, Fraction(1, 2)) == 49
        assert rescale(1, Fraction(24, 25)) == 0

    def test_identity(self):
        assert rescale(123456, IDENTITY) == 123456

    def test_zero_ratio_yields_zero(self):
        assert rescale(5000, Fraction(0)) == 0

    def test_chained_exact_when_evenly_divisible(self):
        once = rescale(3600, Fraction(1, 2) * Fraction(1, 3))
        chained = rescale(rescale(3600, Fraction(1, 2)), Fraction(1, 3))
        assert once == chained == 600

    def test_chained_drift_bounded_by_one_centisecond(self):
        r1, r2 = Fraction(24, 25), Fraction(25, 30)
        for total in range(0, 20000, 7):
            chained = rescale(rescale(total, r1), r2)
            once = rescale(total, r1 * r2)
            assert abs(chained - once) <= 1

    def test_timestamp_rescale(self):
        assert str(Timestamp(0, 1, 0, 0).rescale(Fraction(24, 25))) == "0:00:57.60"


class TestFormat:
    def test_zero_padding(self):
        assert format_timestamp(0, 1, 2, 5) == "0:01:02.05"

    def test_hours_unbounded(self):
        assert format_timestamp(12, 3, 4, 5) == "12:03:04.05"

    def test_timestamp_str(self):
        assert str(Timestamp(1, 2, 3, 4)) == "1:02:03.04"

    def test_timestamp_normalized(self):
        assert Timestamp(0, 0, 75, 0).normalized() == Timestamp(0, 1, 15, 0)


class TestRatio:
    def test_old_over_new(self):
        assert compute_ratio(24, 25) == Fraction(24, 25)

    def test_missing_rate_is_identity(self):
        assert compute_ratio(None, 25) == IDENTITY
        assert compute_ratio(24, None) == IDENTITY
        assert compute_ratio(None, None) == IDENTITY

    def test_non_positive_rate_is_identity(self):
        assert compute_ratio(0, 25) == IDENTITY
        assert compute_ratio(24, -25) == IDENTITY

    def test_float_rate_is_exact_decimal(self):
        assert compute_ratio(23.976, 25) == Fraction(2997, 3125)

    def test_text_rates(self):
        assert parse_frame_rate("24000/1001") == Fraction(24000, 1001)
        assert parse_frame_rate(" 29.97 ") == Fraction(2997, 100)

    def test_invalid_text_rejected(self):
        with pytest.raises(ValueError):
            parse_frame_rate("fast")
        with pytest.raises(ValueError):
            parse_frame_rate("1/0")
