"""Edit records, the offset transform algebra and the edit buffer."""

from .edit_buffer import EditBuffer
from .models import Collapse, Deletion, Edit, Insertion, Shift, Step
from .planner import Cluster, ClusterOutcome, apply_clustered, plan_clusters
from .transform import ApplicationState, OffsetTransformer

__all__ = [
    "EditBuffer",
    "Edit",
    "Insertion",
    "Deletion",
    "Step",
    "Shift",
    "Collapse",
    "OffsetTransformer",
    "ApplicationState",
    "Cluster",
    "ClusterOutcome",
    "apply_clustered",
    "plan_clusters",
]
