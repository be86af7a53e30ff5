"""Bron–Kerbosch enumeration of maximal cliques.

The graph must be simple. Candidates are tried in ascending vertex order and
all recursion state is passed explicitly, so the functions are re-entrant and
safe to call from several threads on different graphs.
"""

import logging

import networkx as nx

logger = logging.getLogger(__name__)

Clique = frozenset


def find_maximal_cliques(graph: nx.Graph) -> list[Clique]:
    """Find every maximal clique of ``graph``.

    A clique is maximal if no other vertex of the graph is adjacent to all of
    its members. Isolated vertices form singleton cliques.

    Args:
        graph: Undirected simple graph

    Returns:
        One frozenset of vertices per maximal clique
    """
    cliques: list[Clique] = []
    _find_cliques(graph, [], sorted(graph.nodes), [], cliques)
    logger.debug(f"Found {len(cliques)} maximal cliques over {graph.number_of_nodes()} vertices")
    return cliques


def find_biggest_maximal_cliques(graph: nx.Graph) -> list[Clique]:
    """Find the maximal cliques of the largest size."""
    cliques = find_maximal_cliques(graph)
    if not cliques:
        return []
    biggest = max(len(c) for c in cliques)
    return [c for c in cliques if len(c) == biggest]


def _is_exhausted(graph: nx.Graph, candidates: list, already_found: list) -> bool:
    # A vertex already tried that is adjacent to every candidate means this
    # branch can only rebuild cliques found before
    return any(
        all(graph.has_edge(found, candidate) for candidate in candidates)
        for found in already_found
    )


def _find_cliques(
    graph: nx.Graph,
    potential_clique: list,
    candidates: list,
    already_found: list,
    cliques: list[Clique],
) -> None:
    if _is_exhausted(graph, candidates, already_found):
        return

    candidates = list(candidates)
    already_found = list(already_found)
    for candidate in list(candidates):
        candidates.remove(candidate)
        clique = [*potential_clique, candidate]
        neighbors = graph.adj[candidate]

        new_candidates = [c for c in candidates if c in neighbors]
        new_already_found = [f for f in already_found if f in neighbors]

        if not new_candidates and not new_already_found:
            cliques.append(frozenset(clique))
        else:
            _find_cliques(graph, clique, new_candidates, new_already_found, cliques)

        already_found.append(candidate)
