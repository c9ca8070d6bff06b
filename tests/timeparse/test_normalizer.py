import warnings
from datetime import date, datetime, time, timedelta, timezone

import pytest

from src.strand_attendance.strand_attendance.timeparse.model import EpochTime, NativeTime, TextTime, tag_time_value
from src.strand_attendance.strand_attendance.timeparse.normalizer import normalize, normalize_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12:00 AM", 0),
        ("12:00 PM", 720),
        ("08:05 AM", 485),
        ("8:05am", 485),
        ("  08:05 AM  ", 485),
        ("11:59:59 PM", 1439),
        ("07:52", 472),
        ("16:00:00", 960),
        ("2025-08-23 08:12:00", 492),
        ("2025-08-23T08:12", 492),
        ("2025-08-23T08:12:00Z", 492),
        ("2025-08-23T08:12:00.250+08:00", 492),
        ("2025-08-23T23:30:00-0500", 1410),
        ("Aug 23 2025 7:52 AM", 472),
    ],
)
def test_normalize_text_variants(text, expected):
    assert normalize(TextTime(text)) == expected


@pytest.mark.parametrize("text", ["", "   ", "not a time", "25:00", "08:75"])
def test_unparseable_or_empty_text_is_none(text):
    assert normalize(TextTime(text)) is None


@pytest.mark.parametrize("text", ["Monday", "March", "5", "9", "2025-08-23", "8 AM"])
def test_text_without_a_clock_time_is_none(text):
    assert normalize(TextTime(text)) is None


def test_unknown_zone_name_is_none_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert normalize(TextTime("Aug 23 2025 7:52 AM ZAP")) is None
        assert normalize(TextTime("Aug 23 2025 7:52 AM")) == 472


def test_absent_value_is_none():
    assert normalize(None) is None
    assert normalize_text(None) is None


def test_zone_suffix_does_not_shift_embedded_digits():
    assert normalize(TextTime("2025-08-23 08:00:00+09:00")) == normalize(TextTime("2025-08-23 08:00:00Z")) == 480


def test_native_values():
    assert normalize(NativeTime(time(8, 5))) == 485
    assert normalize(NativeTime(datetime(2025, 8, 23, 13, 30, 45))) == 810
    assert normalize(NativeTime(date(2025, 8, 23))) == 0


def test_aware_native_datetime_uses_local_clock():
    moment = datetime(2025, 8, 23, 8, 0, tzinfo=timezone(timedelta(hours=3)))
    local = moment.astimezone()
    assert normalize(NativeTime(moment)) == local.hour * 60 + local.minute


def test_epoch_millis_use_local_clock():
    millis = 1755936720000
    local = datetime.fromtimestamp(millis / 1000)
    assert normalize(EpochTime(millis)) == local.hour * 60 + local.minute


@pytest.mark.parametrize("millis", [float("nan"), float("inf"), 1e20])
def test_invalid_epoch_is_none(millis):
    assert normalize(EpochTime(millis)) is None


def test_normalize_is_pure():
    value = TextTime("07:45 AM")
    assert normalize(value) == normalize(value) == 465


def test_untagged_value_is_rejected():
    with pytest.raises(TypeError):
        normalize("08:00 AM")


def test_tag_time_value_declares_shape():
    assert tag_time_value(None) is None
    assert tag_time_value("08:00 AM") == TextTime("08:00 AM")
    assert tag_time_value(1755936720000) == EpochTime(1755936720000)
    assert tag_time_value(time(8, 0)) == NativeTime(time(8, 0))
    with pytest.raises(TypeError):
        tag_time_value(True)
