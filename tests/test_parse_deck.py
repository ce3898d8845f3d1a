from datetime import datetime, timedelta

from contentparse.parse_deck import ParseStats


def test_stats_defaults():
    stats = ParseStats()
    assert stats.elapsed == "00:00"
    assert stats.rate == "-- items/s"
    assert stats.items_done == 0


def test_stats_progress():
    start = datetime(2024, 1, 1, 12, 0, 0)
    stats = ParseStats(
        items_parsed=8,
        items_failed=2,
        start_time=start,
        end_time=start + timedelta(seconds=65),
    )
    assert stats.items_done == 10
    assert stats.elapsed == "01:05"
    assert stats.rate == "0.2 items/s"


def test_copy_is_independent():
    stats = ParseStats()
    stats.type_counts["document"] += 1

    snapshot = stats.copy()
    stats.type_counts["document"] += 1
    stats.items_parsed = 5

    assert snapshot.type_counts["document"] == 1
    assert snapshot.items_parsed == 0
