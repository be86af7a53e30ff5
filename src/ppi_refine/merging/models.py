"""Records of vertex contractions."""

from dataclasses import dataclass, field

from ..graph.network import EdgeId, Vertex

DegenerateSet = tuple[Vertex, ...]


@dataclass
class MergeUpdate:
    """What happened when one degenerate set was contracted.

    Attributes:
        v0: The surviving representative vertex.
        vertices: Vertices contracted into ``v0`` and removed.
        moved_interactions: Interaction edges re-attached to ``v0``.
        removed_interactions: Interaction edges dropped because ``v0`` already
            had an edge to the same neighbour.
        removed_homologies: Homology edges removed with their vertices.
    """

    v0: Vertex
    vertices: set[Vertex] = field(default_factory=set)
    moved_interactions: set[EdgeId] = field(default_factory=set)
    removed_interactions: set[EdgeId] = field(default_factory=set)
    removed_homologies: set[EdgeId] = field(default_factory=set)
