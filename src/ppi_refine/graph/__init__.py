from .connected_components import find_connected_components
from .io import read_dual_graph, write_dual_graph, write_edge_list
from .network import DualGraph, EdgeKind, HomologyEdge, InteractionEdge
from .trimming import trim_edges

__all__ = [
    "DualGraph",
    "EdgeKind",
    "HomologyEdge",
    "InteractionEdge",
    "find_connected_components",
    "read_dual_graph",
    "trim_edges",
    "write_dual_graph",
    "write_edge_list",
]
