"""Domain models for the dual interaction/homology graph.

Both graphs share one vertex identifier space. Edge objects are owned by
per-graph tables keyed by edge id; the ``networkx`` graphs only carry the
adjacency and a reference to the owning edge under the ``edge`` attribute.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import networkx as nx

logger = logging.getLogger(__name__)

Vertex = int
EdgeId = int


class EdgeKind(str, Enum):
    """Which of the two graphs an edge belongs to."""

    INTERACTION = "interaction"
    HOMOLOGY = "homology"


@dataclass(eq=False)
class Edge:
    """A weighted undirected edge. Identity is the edge id."""

    edge_id: EdgeId
    weight: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return type(self) is type(other) and self.edge_id == other.edge_id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.edge_id))


@dataclass(eq=False)
class InteractionEdge(Edge):
    """Candidate physical interaction; ``weight`` is its probability."""


@dataclass(eq=False)
class HomologyEdge(Edge):
    """Evidence of evolutionary or structural relatedness."""

    @property
    def score(self) -> float:
        return self.weight

    @score.setter
    def score(self, value: float) -> None:
        self.weight = value


class _EdgeTable:
    """Adjacency plus the edge and endpoint tables of a single graph."""

    def __init__(self, kind: EdgeKind) -> None:
        self.kind = kind
        self.graph = nx.Graph()
        self.edges: dict[EdgeId, Edge] = {}
        self.endpoints: dict[EdgeId, tuple[Vertex, Vertex]] = {}

    def add(self, edge: Edge, u: Vertex, v: Vertex) -> None:
        if edge.edge_id in self.edges:
            raise ValueError(f"Duplicate {self.kind.value} edge id {edge.edge_id}")
        if u == v:
            raise ValueError(f"Self-loop on vertex {u} is not allowed")
        if self.graph.has_edge(u, v):
            raise ValueError(f"Vertices {u} and {v} already share a {self.kind.value} edge")
        self.graph.add_edge(u, v, edge=edge)
        self.edges[edge.edge_id] = edge
        self.endpoints[edge.edge_id] = (u, v)

    def remove(self, edge: Edge) -> None:
        u, v = self.endpoints.pop(edge.edge_id)
        del self.edges[edge.edge_id]
        self.graph.remove_edge(u, v)

    def find(self, u: Vertex, v: Vertex) -> Edge | None:
        data = self.graph.get_edge_data(u, v)
        return None if data is None else data["edge"]

    def incident(self, vertex: Vertex) -> list[Edge]:
        if vertex not in self.graph:
            return []
        return [
            data["edge"]
            for _, _, data in sorted(self.graph.edges(vertex, data=True), key=lambda e: e[1])
        ]

    def neighbors(self, vertex: Vertex) -> list[Vertex]:
        if vertex not in self.graph:
            return []
        return sorted(self.graph.neighbors(vertex))


class DualGraph:
    """An interaction graph and a homology graph over the same vertices.

    Removing a vertex is terminal: its id can never be added back.
    """

    def __init__(self) -> None:
        self._vertices: set[Vertex] = set()
        self._removed: set[Vertex] = set()
        self._tables = {
            EdgeKind.INTERACTION: _EdgeTable(EdgeKind.INTERACTION),
            EdgeKind.HOMOLOGY: _EdgeTable(EdgeKind.HOMOLOGY),
        }

    # Vertices

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex to both graphs. Returns False if it was already present."""
        if vertex in self._removed:
            raise ValueError(f"Vertex {vertex} was removed and cannot be added again")
        if vertex < 0:
            raise ValueError(f"Vertex ids must be non-negative, got {vertex}")
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        for table in self._tables.values():
            table.graph.add_node(vertex)
        return True

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex that no longer has any edge."""
        if vertex not in self._vertices:
            raise KeyError(vertex)
        if self.interaction_degree(vertex) or self.homology_degree(vertex):
            raise ValueError(f"Vertex {vertex} still has edges")
        for table in self._tables.values():
            table.graph.remove_node(vertex)
        self._vertices.remove(vertex)
        self._removed.add(vertex)

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    def vertices(self) -> list[Vertex]:
        return sorted(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    # Generic edge access

    def add_edge(self, kind: EdgeKind, edge: Edge, u: Vertex, v: Vertex) -> None:
        """Add an edge, creating missing endpoints in the shared vertex set."""
        self.add_vertex(u)
        self.add_vertex(v)
        self._tables[kind].add(edge, u, v)

    def remove_edge(self, kind: EdgeKind, edge: Edge) -> None:
        self._tables[kind].remove(edge)

    def edges(self, kind: EdgeKind, vertex: Vertex | None = None) -> list[Edge]:
        """All edges of one graph in id order, or those incident to ``vertex``."""
        table = self._tables[kind]
        if vertex is None:
            return [table.edges[i] for i in sorted(table.edges)]
        return table.incident(vertex)

    def edge_count(self, kind: EdgeKind) -> int:
        return len(self._tables[kind].edges)

    def endpoints(self, kind: EdgeKind, edge: Edge) -> tuple[Vertex, Vertex]:
        return self._tables[kind].endpoints[edge.edge_id]

    def get_edge(self, kind: EdgeKind, edge_id: EdgeId) -> Edge:
        return self._tables[kind].edges[edge_id]

    def find_edge(self, kind: EdgeKind, u: Vertex, v: Vertex) -> Edge | None:
        return self._tables[kind].find(u, v)

    def neighbors(self, kind: EdgeKind, vertex: Vertex) -> list[Vertex]:
        """Neighbours of ``vertex`` in ascending id order."""
        return self._tables[kind].neighbors(vertex)

    # Interaction graph

    def add_interaction(self, edge: InteractionEdge, u: Vertex, v: Vertex) -> None:
        self.add_edge(EdgeKind.INTERACTION, edge, u, v)

    def remove_interaction(self, edge: InteractionEdge) -> None:
        self.remove_edge(EdgeKind.INTERACTION, edge)

    def interactions(self, vertex: Vertex | None = None) -> list[InteractionEdge]:
        return self.edges(EdgeKind.INTERACTION, vertex)  # type: ignore[return-value]

    @property
    def interaction_count(self) -> int:
        return self.edge_count(EdgeKind.INTERACTION)

    def interaction_neighbors(self, vertex: Vertex) -> list[Vertex]:
        return self.neighbors(EdgeKind.INTERACTION, vertex)

    def interaction_degree(self, vertex: Vertex) -> int:
        return self._tables[EdgeKind.INTERACTION].graph.degree(vertex)

    def find_interaction(self, u: Vertex, v: Vertex) -> InteractionEdge | None:
        return self.find_edge(EdgeKind.INTERACTION, u, v)  # type: ignore[return-value]

    def is_interacting(self, u: Vertex, v: Vertex) -> bool:
        return self._tables[EdgeKind.INTERACTION].graph.has_edge(u, v)

    def interaction_endpoints(self, edge: InteractionEdge) -> tuple[Vertex, Vertex]:
        return self.endpoints(EdgeKind.INTERACTION, edge)

    # Homology graph

    def add_homology(self, edge: HomologyEdge, u: Vertex, v: Vertex) -> None:
        self.add_edge(EdgeKind.HOMOLOGY, edge, u, v)

    def remove_homology(self, edge: HomologyEdge) -> None:
        self.remove_edge(EdgeKind.HOMOLOGY, edge)

    def homologies(self, vertex: Vertex | None = None) -> list[HomologyEdge]:
        return self.edges(EdgeKind.HOMOLOGY, vertex)  # type: ignore[return-value]

    @property
    def homology_count(self) -> int:
        return self.edge_count(EdgeKind.HOMOLOGY)

    def homology_neighbors(self, vertex: Vertex) -> list[Vertex]:
        return self.neighbors(EdgeKind.HOMOLOGY, vertex)

    def homology_degree(self, vertex: Vertex) -> int:
        return self._tables[EdgeKind.HOMOLOGY].graph.degree(vertex)

    def find_homology(self, u: Vertex, v: Vertex) -> HomologyEdge | None:
        return self.find_edge(EdgeKind.HOMOLOGY, u, v)  # type: ignore[return-value]

    def is_homologous(self, u: Vertex, v: Vertex) -> bool:
        return self._tables[EdgeKind.HOMOLOGY].graph.has_edge(u, v)

    def homology_endpoints(self, edge: HomologyEdge) -> tuple[Vertex, Vertex]:
        return self.endpoints(EdgeKind.HOMOLOGY, edge)

    def homology_view(self) -> nx.Graph:
        """Read-only view of the homology adjacency (edges carry ``edge``)."""
        return self._tables[EdgeKind.HOMOLOGY].graph.copy(as_view=True)

    # Whole-graph helpers

    def subgraph(self, vertices: Iterable[Vertex]) -> "DualGraph":
        """Induced dual graph that shares edge objects with this one."""
        keep = set(vertices)
        sub = DualGraph()
        for vertex in sorted(keep & self._vertices):
            sub.add_vertex(vertex)
        for kind, table in self._tables.items():
            for edge_id in sorted(table.edges):
                u, v = table.endpoints[edge_id]
                if u in keep and v in keep:
                    sub.add_edge(kind, table.edges[edge_id], u, v)
        return sub

    def copy(self) -> "DualGraph":
        """Independent copy with fresh edge objects."""
        other = DualGraph()
        for vertex in sorted(self._vertices):
            other.add_vertex(vertex)
        for kind, table in self._tables.items():
            for edge_id in sorted(table.edges):
                edge = table.edges[edge_id]
                u, v = table.endpoints[edge_id]
                other.add_edge(kind, type(edge)(edge_id=edge.edge_id, weight=edge.weight), u, v)
        other._removed = set(self._removed)
        return other

    def __repr__(self) -> str:
        return (
            f"DualGraph(vertices={self.vertex_count}, "
            f"interactions={self.interaction_count}, homologies={self.homology_count})"
        )
