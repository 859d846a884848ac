"""Clustered application of edit sequences.

Edits whose closed original ranges touch or overlap (transitively) form a
cluster. Clusters are applied from the highest position down, each with its
own transformer, so an edit only ever pays for the edits it interacts with.
Within a cluster the recorded order is preserved, which keeps the result
identical to a plain left-to-right application.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from edit_engine.buffer.sync import HostDocument

from .models import Edit
from .transform import ApplicationState


@dataclass(frozen=True, slots=True)
class Cluster:
    low: int
    high: int
    indices: tuple[int, ...]


@dataclass(slots=True)
class ClusterOutcome:
    selection: Optional[int]
    mutations: int
    clusters: int


def plan_clusters(edits: Sequence[Edit]) -> List[Cluster]:
    """Group ``edits`` into clusters, ordered from highest to lowest position."""

    if not edits:
        return []

    order = sorted(range(len(edits)), key=lambda index: edits[index].start)
    clusters: List[Cluster] = []
    low = edits[order[0]].start
    high = edits[order[0]].end
    members = [order[0]]
    for index in order[1:]:
        edit = edits[index]
        if edit.start <= high:
            high = max(high, edit.end)
            members.append(index)
            continue
        clusters.append(Cluster(low, high, tuple(sorted(members))))
        low, high, members = edit.start, edit.end, [index]
    clusters.append(Cluster(low, high, tuple(sorted(members))))
    clusters.reverse()
    return clusters


def apply_clustered(
    edits: Sequence[Edit], sink: Optional[HostDocument] = None
) -> ClusterOutcome:
    """Apply ``edits`` cluster by cluster and return the final selection."""

    clusters = plan_clusters(edits)
    if not clusters:
        return ClusterOutcome(selection=None, mutations=0, clusters=0)

    last = len(edits) - 1
    mutations = 0
    selection: Optional[int] = None
    shift_below = 0
    for cluster in clusters:
        state = ApplicationState(sink=sink)
        for index in cluster.indices:
            edits[index].apply_to(state)
        mutations += state.mutations
        if cluster.indices[-1] == last:
            selection = state.selection
        elif selection is not None:
            shift_below += state.transformer.net_delta

    if selection is not None:
        selection += shift_below
    return ClusterOutcome(
        selection=selection,
        mutations=mutations,
        clusters=len(clusters),
    )


__all__ = ["Cluster", "ClusterOutcome", "apply_clustered", "plan_clusters"]
