from datetime import datetime
from types import SimpleNamespace

from plates.services.muscle import (
    exercise_matches_muscle_tab,
    get_muscle_groups,
    get_primary_muscle_group,
)
from plates.services.weight import weight_summary

from conftest import utc


def exercise(groups):
    return SimpleNamespace(muscle_group=groups)


def test_legacy_string_group_becomes_list():
    assert get_muscle_groups(exercise("Chest")) == ["Chest"]
    assert get_primary_muscle_group(exercise(["Back", "Biceps"])) == "Back"
    assert get_primary_muscle_group(exercise([])) is None


def test_muscle_tabs():
    curl = exercise(["Biceps"])
    bench = exercise(["Chest", "Triceps"])
    squat = exercise("Legs")

    assert exercise_matches_muscle_tab(squat, "All")
    assert exercise_matches_muscle_tab(curl, "Arms")
    assert exercise_matches_muscle_tab(bench, "Arms")
    assert exercise_matches_muscle_tab(bench, "Chest")
    assert not exercise_matches_muscle_tab(squat, "Arms")
    assert not exercise_matches_muscle_tab(curl, "Chest")


def test_weight_summary():
    logs = [
        SimpleNamespace(weight=182.4, date=utc(2026, 2, 1)),
        SimpleNamespace(weight=190.0, date=utc(2026, 1, 1)),
        SimpleNamespace(weight=178.0, date=utc(2026, 3, 1)),
    ]
    summary = weight_summary(logs, goal_weight=178.0)

    assert summary["current"] == 178.0
    assert summary["starting"] == 190.0
    assert summary["highest"] == 190.0
    assert summary["lowest"] == 178.0
    assert summary["change"] == -12.0
    assert summary["goal_reached"] is True


def test_weight_summary_without_logs():
    assert weight_summary([]) is None


def test_weight_summary_orders_naive_and_aware_dates_together():
    logs = [
        SimpleNamespace(weight=180.0, date=utc(2026, 2, 1)),
        SimpleNamespace(weight=185.0, date=datetime(2026, 1, 1, 8)),
    ]

    summary = weight_summary(logs)

    assert summary["starting"] == 185.0
    assert summary["current"] == 180.0
