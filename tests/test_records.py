"""Tests for personal records and session lookups."""

from datetime import date
from types import SimpleNamespace

import pytest

from plates.services import records

from conftest import utc


def strength(weight, reps, when):
    return SimpleNamespace(weight=weight, reps=reps, distance=None, duration=None, date=when)


def cardio(distance, duration, when):
    return SimpleNamespace(weight=None, reps=None, distance=distance, duration=duration, date=when)


@pytest.fixture
def bench_sets():
    return [
        strength(185, 5, utc(2026, 3, 10, 18)),
        strength(205, 1, utc(2026, 3, 10, 18, 10)),
        strength(175, 8, utc(2026, 3, 7, 17)),
        strength(190, 3, utc(2026, 3, 7, 17, 5)),
        strength(165, 10, utc(2026, 3, 3, 17)),
    ]


class TestPersonalRecords:
    def test_heaviest_per_threshold(self, bench_sets):
        prs = records.personal_records(bench_sets)
        by_reps = {p["reps"]: p["weight"] for p in prs}

        assert by_reps == {1: 205.0, 3: 190.0, 5: 185.0, 8: 175.0, 10: 165.0}

    def test_thresholds_without_sets_are_omitted(self):
        prs = records.personal_records([strength(100, 4, utc(2026, 1, 1))])
        assert [p["reps"] for p in prs] == [1, 3]

    def test_ties_keep_first_set(self):
        first = strength(100, 5, utc(2026, 1, 2))
        second = strength(100, 5, utc(2026, 1, 1))
        prs = records.personal_records([first, second], thresholds=[5])
        assert prs[0]["date"] == first.date

    def test_current_max(self, bench_sets):
        assert records.current_max(bench_sets, 3) == 190.0
        assert records.current_max(bench_sets, 6) == 175.0
        assert records.current_max(bench_sets, 12) is None


class TestSessionLookups:
    def test_last_set(self, bench_sets):
        assert records.last_set(bench_sets).weight == 205
        assert records.last_set([]) is None

    def test_last_set_excluding_today(self, bench_sets):
        found = records.last_set_excluding_today(bench_sets, today=date(2026, 3, 10))
        assert found.weight == 190

    def test_top_set_last_session(self, bench_sets):
        top = records.top_set_last_session(bench_sets, today=date(2026, 3, 10))
        assert top.weight == 190
        assert records.top_set_last_session(bench_sets, today=date(2026, 3, 3)) is None

    def test_today_only_history_has_no_previous_session(self, bench_sets):
        assert records.last_set_excluding_today(bench_sets[:2], today=date(2026, 3, 10)) is None


class TestCardio:
    def test_pace(self):
        assert records.pace(cardio(3.1, 24.8, utc(2026, 1, 1))) == pytest.approx(8.0)
        assert records.pace(cardio(0, 10, utc(2026, 1, 1))) is None
        assert records.pace(cardio(3.0, None, utc(2026, 1, 1))) is None

    def test_best_distance(self):
        sets = [cardio(3.1, 25, utc(2026, 1, 1)), cardio(6.2, 55, utc(2026, 1, 2))]
        assert records.best_distance(sets) == 6.2
        assert records.best_distance([]) is None

    def test_distance_labels(self):
        assert records.distance_label(3.1) == "5K"
        assert records.distance_label(13.1) == "Half Marathon"
        assert records.distance_label(1.0) == "1 mi"

    def test_records_match_within_tolerance(self):
        sets = [
            cardio(3.0, 26.0, utc(2026, 1, 1)),
            cardio(3.2, 25.0, utc(2026, 1, 2)),
            cardio(3.4, 20.0, utc(2026, 1, 3)),
            cardio(6.2, 52.5, utc(2026, 1, 4)),
        ]
        found = {r["label"]: r for r in records.cardio_records(sets)}

        assert set(found) == {"5K", "10K"}
        assert found["5K"]["best_time"] == 25.0
        assert found["5K"]["distance"] == 3.2
        assert found["5K"]["best_pace"] == pytest.approx(25.0 / 3.2)

    def test_best_pace_and_history(self):
        sets = [
            cardio(5.0, 45.0, utc(2026, 1, 5)),
            cardio(2.0, 17.0, utc(2026, 1, 1)),
            cardio(None, 30.0, utc(2026, 1, 3)),
        ]
        assert records.best_pace_set(sets).distance == 2.0

        history = records.pace_history(sets)
        assert [p["pace"] for p in history] == [8.5, 9.0]
        assert history[0]["date"] == utc(2026, 1, 1)
