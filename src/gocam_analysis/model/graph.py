"""Read-only indexed view of a GO-CAM Model.

ModelGraph holds no analysis logic. It indexes activities by id, assigns each
activity a stable integer position (ids sorted lexicographically) and groups
causal edges by endpoint, so that traversals can use plain lists of visited
flags and dangling references show up as ordinary lookup misses.
"""

from gocam_analysis.exceptions import LookupMiss, MalformedModel
from gocam_analysis.model.models import Activity, CausalEdge, Model


class ModelGraph:
    """Indexed query interface over an immutable Model.

    Attributes:
        model: The wrapped Model (never mutated)
    """

    def __init__(self, model: Model):
        """Index a model.

        Args:
            model: Model to index

        Raises:
            MalformedModel: If two activities share an id
        """
        self.model = model

        activities_by_id: dict[str, Activity] = {}
        duplicates: list[str] = []
        for activity in model.activities:
            if activity.id in activities_by_id:
                duplicates.append(activity.id)
            else:
                activities_by_id[activity.id] = activity

        if duplicates:
            raise MalformedModel(
                f"Model {model.id} has duplicate activity ids: {sorted(set(duplicates))}",
                details={"model_id": model.id, "duplicate_ids": sorted(set(duplicates))},
            )

        self._ids: tuple[str, ...] = tuple(sorted(activities_by_id))
        self._index: dict[str, int] = {activity_id: i for i, activity_id in enumerate(self._ids)}
        self._activities = activities_by_id
        self._sorted_activities = tuple(activities_by_id[i] for i in self._ids)

        outgoing: dict[str, list[CausalEdge]] = {}
        incoming: dict[str, list[CausalEdge]] = {}
        for edge in model.causal_edges:
            outgoing.setdefault(edge.subject, []).append(edge)
            incoming.setdefault(edge.object, []).append(edge)
        self._outgoing = {k: tuple(v) for k, v in outgoing.items()}
        self._incoming = {k: tuple(v) for k, v in incoming.items()}

    def __len__(self) -> int:
        return len(self._ids)

    def activity(self, activity_id: str) -> Activity | None:
        """Look up an activity, returning None when the id is unknown."""
        return self._activities.get(activity_id)

    def require_activity(self, activity_id: str) -> Activity:
        """Look up an activity.

        Raises:
            LookupMiss: If the id is unknown
        """
        activity = self._activities.get(activity_id)
        if activity is None:
            raise LookupMiss(activity_id)
        return activity

    def has_activity(self, activity_id: str) -> bool:
        return activity_id in self._activities

    def activity_index(self, activity_id: str) -> int | None:
        """Stable integer position of an activity, None when unknown."""
        return self._index.get(activity_id)

    def activity_ids(self) -> tuple[str, ...]:
        """All activity ids in ascending order; position i has index i."""
        return self._ids

    def all_activities(self) -> tuple[Activity, ...]:
        """All activities sorted by id."""
        return self._sorted_activities

    def all_edges(self) -> tuple[CausalEdge, ...]:
        """All causal edges in document order."""
        return self.model.causal_edges

    def outgoing_edges(self, activity_id: str) -> tuple[CausalEdge, ...]:
        """Edges whose subject is activity_id, in document order."""
        return self._outgoing.get(activity_id, ())

    def incoming_edges(self, activity_id: str) -> tuple[CausalEdge, ...]:
        """Edges whose object is activity_id, in document order."""
        return self._incoming.get(activity_id, ())

    def is_self_loop(self, edge: CausalEdge) -> bool:
        return edge.subject == edge.object

    def is_dangling(self, edge: CausalEdge) -> bool:
        """True if either endpoint of the edge is not a known activity."""
        return edge.subject not in self._activities or edge.object not in self._activities

    def resolved_edges(self) -> list[CausalEdge]:
        """Edges between two distinct known activities, in document order."""
        return [
            edge for edge in self.model.causal_edges
            if not self.is_dangling(edge) and not self.is_self_loop(edge)
        ]
