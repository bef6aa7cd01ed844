"""Transitive closure of a directed graph given as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def transitive_closure(graph: Mapping[str, Iterable[str]]) -> dict[str, list[str]]:
    """Return, for each source node, every node reachable from it, sorted.

    Nodes that reach nothing are left out of the result.
    """
    adjacency: dict[str, set[str]] = {src: set(dsts) for src, dsts in graph.items()}
    targets = set().union(*adjacency.values()) if adjacency else set()

    # Warshall's algorithm over the source nodes.
    for k in adjacency:
        via_k = adjacency[k]
        for i, reach in adjacency.items():
            if k in reach:
                reach |= via_k & targets

    return {src: sorted(reach) for src, reach in adjacency.items() if reach}