import pytest

from app.utils.time_range import duration_minutes, overlaps, to_minutes


class TestToMinutes:

    def test_midnight_and_last_minute(self):
        assert to_minutes("00:00") == 0
        assert to_minutes("23:59") == 23 * 60 + 59

    def test_regular_time(self):
        assert to_minutes("09:30") == 570

    @pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "12-00", "", "noon"])
    def test_malformed_time_rejected(self, value):
        with pytest.raises(ValueError):
            to_minutes(value)


def test_duration_of_two_hour_class():
    assert duration_minutes("09:00", "11:00") == 120
    assert duration_minutes("09:00", "11:30") == 150


def test_end_before_start_gives_negative_duration():
    assert duration_minutes("11:00", "09:00") == -120


class TestOverlaps:

    def test_partial_overlap(self):
        assert overlaps("09:00", "11:00", "10:00", "12:00")
        assert overlaps("10:00", "12:00", "09:00", "11:00")

    def test_containment(self):
        assert overlaps("08:00", "12:00", "09:00", "11:00")
        assert overlaps("09:00", "11:00", "08:00", "12:00")

    def test_identical_ranges(self):
        assert overlaps("09:00", "11:00", "09:00", "11:00")

    def test_adjacent_ranges_do_not_overlap(self):
        assert not overlaps("09:00", "11:00", "11:00", "13:00")
        assert not overlaps("11:00", "13:00", "09:00", "11:00")

    def test_disjoint_ranges(self):
        assert not overlaps("06:00", "08:00", "14:00", "16:00")
