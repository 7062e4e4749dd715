from chainbot.game.links import KeyIndex, Link, build_pool
from chainbot.game.usage import UsageTracker


def _tracker(*names, reverse_links=False):
    pool = build_pool([Link.from_name(name) for name in names])
    return UsageTracker(KeyIndex.from_pool(pool, reverse_links=reverse_links))


def test_mark_used_ignores_unknown_keys():
    tracker = _tracker("Cat", "Top")
    tracker.mark_used(["z"], ["q"])
    assert tracker.start_counts == {}
    assert tracker.end_counts == {}


def test_counts_never_exceed_index_count():
    tracker = _tracker("Cat", "Cot", "Top")
    for _ in range(5):
        tracker.mark_used(["c"], [])
    assert tracker.start_counts["c"] == tracker.index.starts["c"] == 2


def test_filter_usable_drops_exhausted_keys():
    tracker = _tracker("Cat", "Cot", "Top")
    assert tracker.filter_usable_starts(["c", "t", "x"]) == ["c", "t"]

    tracker.mark_used(["t"], [])
    assert tracker.filter_usable_starts(["c", "t"]) == ["c"]

    tracker.mark_used(["c"], [])
    assert tracker.filter_usable_starts(["c", "t"]) == ["c"]
    tracker.mark_used(["c"], [])
    assert tracker.filter_usable_starts(["c", "t"]) == []


def test_end_keys_tracked_only_with_reverse_index():
    tracker = _tracker("Cat", "Top")
    tracker.mark_used([], ["t"])
    assert tracker.filter_usable_ends(["t"]) == []

    reverse = _tracker("Cat", "Top", reverse_links=True)
    assert reverse.filter_usable_ends(["t", "p"]) == ["t", "p"]
    reverse.mark_used([], ["t"])
    assert reverse.filter_usable_ends(["t", "p"]) == ["p"]


def test_reset_starts_a_new_cycle():
    tracker = _tracker("Cat", "Top")
    tracker.mark_used(["c", "t"], [])
    tracker.used_ids.add("cat")

    tracker.reset()

    assert tracker.start_counts == {}
    assert tracker.used_ids == set()
    assert tracker.cycles == 1
    assert tracker.filter_usable_starts(["c", "t"]) == ["c", "t"]
