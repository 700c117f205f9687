"""Timespan value type tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from pytimespan import Timespan, Units, recompute


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestConstruction:
    def test_from_units(self):
        assert Timespan.from_units(0, 1, 30).seconds == 90
        assert Timespan.from_units(0, 0, 90).seconds == 90
        assert Timespan.from_units(1, 0, 0).seconds == 3600

    def test_large_values(self):
        assert Timespan.from_units(0, 0, 2**53).seconds == 2**53

    def test_default_is_empty(self, zero):
        assert zero.seconds == 0
        assert zero.is_empty()

    def test_seconds_stored_as_float(self):
        assert isinstance(Timespan(90).seconds, float)

    def test_set_time(self, zero):
        assert zero.set_time(1, 1, 1).seconds == 3600 + 60 + 1

    def test_set_seconds(self, ninety_seconds):
        assert ninety_seconds.set_seconds(5).seconds == 5


class TestFoldIn:
    def test_recompute_minutes(self):
        assert recompute(90, minutes=2) == 210

    def test_recompute_hours(self):
        assert recompute(30, hours=2) == 7230

    def test_recompute_nothing(self):
        assert recompute(42) == 42

    def test_set_minutes_on_zero(self, zero):
        ts = zero.set_minutes(1.5)
        assert ts.format() == "00:01:30"
        assert ts.seconds == pytest.approx(90)

    def test_set_hours_on_zero(self, zero):
        assert zero.set_hours(1.5).format() == "01:30:00"

    def test_set_minutes_keeps_current_seconds(self, ninety_seconds):
        assert ninety_seconds.set_minutes(2).seconds == 120 + 90

    def test_set_hours_keeps_current_seconds(self, ninety_seconds):
        assert ninety_seconds.set_hours(1).seconds == 3600 + 90


class TestArithmetic:
    def test_add_minutes(self, ninety_seconds):
        ninety_seconds.add_minutes(2)
        assert ninety_seconds.seconds == 90 + 120

    def test_add_hours(self):
        ts = Timespan.from_units(0, 0, 30)
        ts.add_hours(2)
        assert ts.seconds == 30 + 7200

    def test_add_seconds(self, ninety_seconds):
        assert ninety_seconds.add_seconds(-100).seconds == -10

    def test_add_sequence(self, zero):
        assert zero.add(0, 0, 59).seconds == 59
        assert zero.add(0, 1).seconds == 60 + 59
        assert zero.add(1).seconds == 3600 + 60 + 59

    def test_add_negative_hour(self, zero):
        assert zero.add(-1).seconds == -3600

    @pytest.mark.parametrize("base", [0, 90, -3600, 0.5])
    @pytest.mark.parametrize(
        "hours,minutes,seconds",
        [(0, 0, 0), (1, 2, 3), (-1, 30, 0), (0.5, 0.25, 1.5), (2, -61, 59)],
    )
    def test_add_equals_single_net_addition(self, base, hours, minutes, seconds):
        expected = base + hours * 3600 + minutes * 60 + seconds
        assert Timespan(base).add(hours, minutes, seconds).seconds == pytest.approx(expected)

    def test_chaining_returns_same_instance(self, zero):
        assert zero.add_hours(1).add_minutes(2).add_seconds(3) is zero
        assert zero.seconds == 3723

    def test_sum(self):
        others = [Timespan.from_units(0, 0, n) for n in (1, 2, 3)]
        ts = Timespan.from_units(0, 0, 4).sum(*others)
        assert ts.seconds == pytest.approx(10)

    def test_sum_nothing(self, ninety_seconds):
        assert ninety_seconds.sum().seconds == 90

    def test_negate(self, ninety_seconds):
        assert ninety_seconds.negate() is ninety_seconds
        assert ninety_seconds.seconds == -90
        assert ninety_seconds.is_negative()

    def test_unary_minus_copies(self, ninety_seconds):
        negated = -ninety_seconds
        assert negated.seconds == -90
        assert ninety_seconds.seconds == 90

    def test_add_relative(self):
        ts = Timespan.from_units(0, 1, 0)
        assert ts.add_relative(30).seconds == 90
        assert ts.add_relative(60).seconds == 150
        assert ts.add_relative(-1800).seconds == 150 - 1800

    def test_from_relative(self):
        assert Timespan.from_relative(2 * 86400).format() == "48:00:00"
        assert Timespan.from_relative(-3 * 86400).format() == "-72:00:00"


class TestDiff:
    def test_absolute(self):
        a = Timespan.from_units(0, 2, 10)
        b = Timespan.from_units(0, 3, 30)
        diff = a.diff(b)
        assert isinstance(diff, Timespan)
        assert diff.seconds == 80
        assert diff.format() == "00:01:20"

    def test_signed(self):
        a = Timespan.from_units(0, 2, 10)
        b = Timespan.from_units(0, 3, 30)
        diff = b.diff(a, absolute=False)
        assert diff.seconds == -80
        assert diff.is_negative()
        assert diff.format() == "-00:01:20"

    def test_absolute_of_reversed(self):
        a = Timespan.from_units(0, 2, 10)
        b = Timespan.from_units(0, 3, 30)
        assert b.diff(a).seconds == 80

    def test_operands_unchanged(self):
        a = Timespan(10)
        b = Timespan(30)
        a.diff(b)
        assert (a.seconds, b.seconds) == (10, 30)


class TestInstantDiff:
    def test_forward(self):
        ts = Timespan.from_instant_diff(utc(2015, 1, 1, 23), utc(2015, 1, 3, 2))
        assert ts.format() == "27:00:00"

    def test_backward(self):
        ts = Timespan.from_instant_diff(utc(2021, 1, 3, 2), utc(2021, 1, 1, 23))
        assert ts.format() == "-27:00:00"

    def test_over_a_year(self):
        ts = Timespan.from_instant_diff(utc(2021, 1, 1, 12), utc(2022, 1, 1, 13, 0, 2))
        assert ts.seconds == 31539602
        assert ts.format("%h:%i:%s") == "8761:00:02"

    def test_epoch_seconds(self):
        assert Timespan.from_instant_diff(100, 40).seconds == -60

    def test_sub_second_instants_are_truncated(self):
        start = utc(2021, 1, 1, 0, 0, 0, 900000)
        end = utc(2021, 1, 1, 0, 0, 1, 100000)
        assert Timespan.from_instant_diff(start, end).seconds == 1


class TestQueries:
    def test_as_minutes(self):
        assert Timespan.from_units(0, 0, 30).as_minutes() == 0.5

    def test_as_hours(self):
        assert Timespan.from_units(0, 30, 0).as_hours() == 0.5

    @pytest.mark.parametrize("minutes", [-1, 0, 1])
    def test_is_empty(self, minutes):
        assert Timespan.from_units(0, minutes, 0).is_empty() == (minutes == 0)

    def test_is_negative(self, negative_hour, zero):
        assert negative_hour.is_negative()
        assert not zero.is_negative()

    def test_get_units(self):
        assert Timespan.from_units(1, 2, 30).get_units() == Units(
            hours=1, minutes=2, seconds=30, total_minutes=62
        )

    def test_get_units_uses_magnitude(self):
        assert Timespan.from_units(-1, -2, -30).get_units() == Units(
            hours=1, minutes=2, seconds=30, total_minutes=62
        )

    def test_get_units_drops_fraction(self):
        assert Timespan(59.999).get_units().seconds == 59


class TestComparison:
    def test_equality(self):
        assert Timespan.from_units(0, 1, 30) == Timespan(90)

    def test_ordering(self):
        assert Timespan(-1) < Timespan(0) < Timespan(1)
        assert max(Timespan(5), Timespan(50), Timespan(10)).seconds == 50


class TestConversion:
    def test_to_timedelta(self, ninety_seconds):
        assert ninety_seconds.to_timedelta() == timedelta(minutes=1, seconds=30)

    def test_from_timedelta(self):
        assert Timespan.from_timedelta(timedelta(hours=-1)).format() == "-01:00:00"

    def test_json_value(self):
        assert json.dumps(Timespan.from_units(0, 1, 2).to_json()) == '"00:01:02"'
