from __future__ import annotations

import random

import pytest

from edit_engine import EditBuffer, InvalidOffsetError, TextDocument
from edit_engine.edits import (
    Cluster,
    Deletion,
    Insertion,
    apply_clustered,
    plan_clusters,
)
from edit_engine.runtime.config import override_settings

DIGITS = "0123456789"


def make_random_buffer(seed: int, length: int, count: int) -> EditBuffer:
    rng = random.Random(seed)
    buffer = EditBuffer()
    for _ in range(count):
        kind = rng.choice(("insert", "delete", "replace", "cursor"))
        start = rng.randint(0, length)
        end = rng.randint(start, min(length, start + 4))
        if kind == "insert":
            buffer.insert(start, rng.choice(("", "a", "bc", "def")))
        elif kind == "delete":
            buffer.delete(start, end)
        elif kind == "replace":
            buffer.replace(start, end, rng.choice(("", "X", "YZ")))
        else:
            buffer.move_cursor_to(start)
    return buffer


def run(buffer: EditBuffer, text: str, strategy: str) -> tuple[str, int | None]:
    document = TextDocument.from_text(text)
    selection = buffer.apply(document, strategy=strategy)
    return document.get(), selection


def test_plan_clusters_groups_touching_ranges() -> None:
    edits = [Insertion(5, "A"), Deletion(3, 7), Insertion(20, "B"), Deletion(8, 9)]

    clusters = plan_clusters(edits)

    assert clusters == [
        Cluster(20, 20, (2,)),
        Cluster(8, 9, (3,)),
        Cluster(3, 7, (0, 1)),
    ]


def test_plan_clusters_merges_adjacent_edits() -> None:
    edits = [Deletion(3, 7), Insertion(7, "x"), Deletion(7, 9)]

    assert plan_clusters(edits) == [Cluster(3, 9, (0, 1, 2))]


def test_plan_clusters_empty() -> None:
    assert plan_clusters([]) == []


def test_clustered_preview_without_edits() -> None:
    outcome = apply_clustered([])

    assert outcome.selection is None
    assert outcome.clusters == 0


def test_clustered_selection_accounts_for_lower_clusters() -> None:
    buffer = EditBuffer().delete(0, 3).insert(5, "AB")

    assert run(buffer, DIGITS, "clustered") == ("34AB56789", 4)
    assert run(buffer, DIGITS, "sequential") == ("34AB56789", 4)


def test_clustered_keeps_order_inside_cluster() -> None:
    insert_first = EditBuffer().insert(5, "A").delete(3, 7)
    delete_first = EditBuffer().delete(3, 7).insert(5, "A")

    assert run(insert_first, DIGITS, "clustered") == ("012789", 3)
    assert run(delete_first, DIGITS, "clustered") == ("012A789", 4)


@pytest.mark.parametrize("seed", range(12))
def test_clustered_matches_sequential(seed: int) -> None:
    text = "abcdefghijklmnopqrstuvwxyz0123"
    buffer = make_random_buffer(seed, len(text), count=8 + seed)

    assert run(buffer, text, "clustered") == run(buffer, text, "sequential")
    assert buffer.compute_resulting_selection(
        strategy="clustered"
    ) == buffer.compute_resulting_selection(strategy="sequential")


def test_auto_strategy_results_match_sequential() -> None:
    override_settings(strategy="auto", cluster_threshold=3)
    small = EditBuffer().insert(0, "a")
    large = EditBuffer().insert(0, "a").insert(4, "b").delete(6, 8)

    assert run(small, DIGITS, "auto") == ("a0123456789", 1)
    assert run(large, DIGITS, "auto") == ("a0123b4589", 8)
    assert large.compute_resulting_selection() == 8


@pytest.mark.parametrize(("threshold", "expected"), [(2, "abc"), (3, "Xabc")])
def test_auto_strategy_switches_at_threshold(threshold: int, expected: str) -> None:
    # clustered runs the high edit first, so the bad offset fails before "X" lands
    override_settings(strategy="auto", cluster_threshold=threshold)
    document = TextDocument.from_text("abc")
    buffer = EditBuffer().insert(0, "X").insert(10, "y")

    with pytest.raises(InvalidOffsetError):
        buffer.apply(document)

    assert document.get() == expected
