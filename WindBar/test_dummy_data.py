"""Tests for the offline dummy data generator."""
import dataclasses
from datetime import datetime
from dummy_data import dummy_snapshot


def test_dummy_snapshot_fully_populated():
    snapshot, hourly = dummy_snapshot(datetime(2024, 5, 1, 22, 30))

    for f in dataclasses.fields(snapshot):
        assert getattr(snapshot, f.name) is not None, f.name
    assert snapshot.wind_speed == 8.8
    assert snapshot.wind_direction_compass == "SSW"
    assert snapshot.wind_direction_arrow == "↙"
    assert len(hourly) == 6
    for entry in hourly:
        for f in dataclasses.fields(entry):
            assert getattr(entry, f.name) is not None, f.name


def test_dummy_hourly_labels_wrap_midnight():
    _, hourly = dummy_snapshot(datetime(2024, 5, 1, 22, 30))
    assert [e.label for e in hourly] == ["22:00", "23:00", "00:00", "01:00", "02:00", "03:00"]


def test_dummy_is_deterministic():
    now = datetime(2024, 5, 1, 8, 0)
    assert dummy_snapshot(now) == dummy_snapshot(now)


def test_dummy_hourly_trends():
    _, hourly = dummy_snapshot(datetime(2024, 5, 1, 8, 0))
    assert hourly[0].wind_speed == 8.8
    assert hourly[5].wind_speed == 8.8 + 5 * 1.5
    assert hourly[5].pressure_hpa == 1009.0 - 2.5
