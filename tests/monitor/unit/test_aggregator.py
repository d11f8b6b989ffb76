import copy
import random
import pytest
from src.monitor.application.aggregator import (
    count_by_type, most_recent, category_stats, filter_by_categories, event_bounds
)
from src.monitor.application.simulator import EventSimulator
from src.monitor.domain.categories import URBAN_CATEGORIES

# --- count_by_type ---
def test_count_empty_is_all_zero(categories):
    assert count_by_type([], categories) == {
        "fire": 0, "dense_traffic": 0, "sparse_traffic": 0, "accident": 0
    }

def test_count_keeps_table_order(categories, make_event):
    counts = count_by_type([make_event(0, "accident")], categories)
    assert list(counts) == ["fire", "dense_traffic", "sparse_traffic", "accident"]

def test_count_ignores_unknown_labels(categories, make_event):
    events = [make_event(0, "fire"), make_event(1, "flood"), make_event(2, "fire")]
    counts = count_by_type(events, categories)
    assert counts["fire"] == 2
    assert "flood" not in counts
    assert sum(counts.values()) == 2

def test_count_sums_to_event_total(categories, cameras, fixed_now):
    for seed in range(10):
        events = EventSimulator(categories, rng=random.Random(seed)).simulate(cameras, fixed_now)
        assert sum(count_by_type(events, categories).values()) == len(events)

def test_count_with_other_vocabulary(make_event):
    events = [make_event(0, "flood"), make_event(1, "construction"), make_event(2, "fire")]
    assert count_by_type(events, URBAN_CATEGORIES) == {
        "traffic": 0, "construction": 1, "accident": 0, "flood": 1
    }

# --- most_recent ---
def test_most_recent_empty():
    assert most_recent([]) is None

def test_most_recent_single(make_event):
    event = make_event(0)
    assert most_recent([event]) is event

def test_most_recent_latest_wins(make_event):
    early = make_event(0, seconds=0)
    late = make_event(1, seconds=5)
    middle = make_event(2, seconds=3)
    assert most_recent([early, late, middle]) is late

def test_most_recent_tie_keeps_first(make_event):
    first = make_event(0, seconds=10)
    second = make_event(1, seconds=10)
    assert most_recent([first, second]) is first
    assert most_recent([second, first]) is second

# --- idempotence ---
def test_aggregation_is_idempotent_and_pure(categories, make_event):
    events = [make_event(0, "fire", seconds=1), make_event(1, "accident", seconds=2)]
    before = copy.copy(events)

    assert count_by_type(events, categories) == count_by_type(events, categories)
    assert most_recent(events) is most_recent(events)
    assert category_stats(events, categories) == category_stats(events, categories)
    assert events == before

# --- supplements ---
def test_category_stats(categories, make_event):
    events = [
        make_event(0, "fire", confidence=0.8),
        make_event(1, "fire", confidence=0.9),
        make_event(2, "accident", confidence=0.75),
        make_event(3, "unknown", confidence=0.99),
    ]
    stats = category_stats(events, categories)
    assert stats["fire"].count == 2
    assert stats["fire"].avg_confidence == pytest.approx(0.85)
    assert stats["accident"].count == 1
    assert stats["dense_traffic"].count == 0
    assert stats["dense_traffic"].avg_confidence == 0.0
    assert "unknown" not in stats

def test_filter_by_categories(make_event):
    events = [make_event(0, "fire"), make_event(1, "accident"), make_event(2, "fire")]
    assert [e.id for e in filter_by_categories(events, ["fire"])] == ["C0", "C2"]
    assert filter_by_categories(events, []) == []

def test_event_bounds(make_event):
    assert event_bounds([]) is None
    events = [make_event(0), make_event(4), make_event(2)]
    (south, west), (north, east) = event_bounds(events)
    assert south == pytest.approx(-36.84)
    assert north == pytest.approx(-36.8)
    assert west == pytest.approx(174.7)
    assert east == pytest.approx(174.74)
