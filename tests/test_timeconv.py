import math

import pytest

from skypal.timeconv import (
    CalendarDate,
    FieldRangeError,
    Sexagesimal,
    besselian_epoch,
    besselian_epoch_to_mjd,
    calendar_to_mjd,
    days_to_hms,
    dms_to_radians,
    hms_to_days,
    hms_to_radians,
    julian_epoch,
    julian_epoch_to_mjd,
    mjd_to_calendar,
    radians_to_dms,
    radians_to_hms,
)


def test_mjd_origin():
    assert calendar_to_mjd(1858, 11, 17) == 0.0


def test_j2000_epoch():
    assert julian_epoch(51544.5) == pytest.approx(2000.0, abs=1e-12)


@pytest.mark.parametrize(
    "ymd",
    [(2000, 1, 1), (1999, 12, 31), (2024, 2, 29), (1600, 3, 1), (1, 1, 1), (2100, 12, 31)],
)
def test_calendar_round_trip(ymd):
    mjd = calendar_to_mjd(*ymd)
    assert mjd_to_calendar(mjd) == CalendarDate(*ymd, 0.0)


def test_fraction_of_day_is_kept():
    mjd = calendar_to_mjd(2012, 3, 6) + 0.25
    result = mjd_to_calendar(mjd)
    assert (result.year, result.month, result.day) == (2012, 3, 6)
    assert result.fraction == pytest.approx(0.25, abs=1e-9)


def test_consecutive_days_differ_by_one():
    assert calendar_to_mjd(2000, 3, 1) - calendar_to_mjd(2000, 2, 29) == 1.0


def test_bad_year():
    with pytest.raises(FieldRangeError) as err:
        calendar_to_mjd(-4800, 1, 1)
    assert err.value.field == "year"
    assert err.value.value is None


def test_bad_month():
    with pytest.raises(FieldRangeError) as err:
        calendar_to_mjd(2000, 13, 1)
    assert err.value.field == "month"


def test_bad_day_still_computes():
    with pytest.raises(FieldRangeError) as err:
        calendar_to_mjd(2001, 2, 29)
    assert err.value.field == "day"
    assert err.value.value == calendar_to_mjd(2001, 3, 1)


def test_mjd_out_of_range():
    with pytest.raises(FieldRangeError):
        mjd_to_calendar(-2500000.0)


def test_dms_half_turn():
    assert dms_to_radians(180, 0, 0.0) == pytest.approx(math.pi, rel=1e-15)


def test_hms_radians_and_days_consistent():
    days = hms_to_days(5, 17, 42.5)
    rad = hms_to_radians(5, 17, 42.5)
    assert rad == pytest.approx(days * math.tau, rel=1e-14)


@pytest.mark.parametrize(
    "call, field",
    [
        (lambda: dms_to_radians(360, 0, 0.0), "degrees"),
        (lambda: dms_to_radians(10, 60, 0.0), "arcmin"),
        (lambda: dms_to_radians(10, 5, 60.0), "arcsec"),
        (lambda: hms_to_days(24, 0, 0.0), "hours"),
        (lambda: hms_to_radians(1, -1, 0.0), "minutes"),
        (lambda: hms_to_days(1, 1, -0.5), "seconds"),
    ],
)
def test_field_range_errors(call, field):
    with pytest.raises(FieldRangeError) as err:
        call()
    assert err.value.field == field
    assert err.value.value is not None and err.value.value >= 0.0


def test_field_error_is_value_error():
    with pytest.raises(ValueError):
        hms_to_days(25, 0, 0.0)


def test_days_to_hms_noon():
    assert days_to_hms(0, 0.5) == Sexagesimal("+", 12, 0, 0, 0)


def test_days_to_hms_sign():
    assert days_to_hms(2, -0.5).sign == "-"
    assert days_to_hms(2, -0.5).units == days_to_hms(2, 0.5).units


def test_radians_to_hms_round_trip():
    angle = hms_to_radians(13, 41, 27.123)
    parts = radians_to_hms(3, angle)
    back = hms_to_radians(parts.units, parts.minutes, parts.seconds + parts.fraction / 1000.0)
    assert back == pytest.approx(angle, abs=1e-10)


def test_radians_to_dms_round_trip():
    angle = dms_to_radians(47, 12, 5.5)
    parts = radians_to_dms(4, angle)
    assert parts.sign == "+"
    back = dms_to_radians(parts.units, parts.minutes, parts.seconds + parts.fraction / 10000.0)
    assert back == pytest.approx(angle, abs=1e-11)


def test_negative_ndp_rounds_to_whole_minutes():
    parts = days_to_hms(-2, hms_to_days(3, 4, 40.0))
    assert parts.seconds == 0 and parts.fraction == 0
    assert (parts.units, parts.minutes) == (3, 5)


@pytest.mark.parametrize("epoch", [1850.0, 1950.0, 2000.0, 2025.5])
def test_julian_epoch_round_trip(epoch):
    assert julian_epoch(julian_epoch_to_mjd(epoch)) == pytest.approx(epoch, abs=1e-10)


@pytest.mark.parametrize("epoch", [1900.0, 1950.0, 1975.25])
def test_besselian_epoch_round_trip(epoch):
    assert besselian_epoch(besselian_epoch_to_mjd(epoch)) == pytest.approx(epoch, abs=1e-8)


def test_epochs_increase_with_date():
    assert julian_epoch(60000.0) > julian_epoch(50000.0)
    assert besselian_epoch(60000.0) > besselian_epoch(50000.0)