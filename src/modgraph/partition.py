"""Partition of the graph of squares into connected subgraphs.

Edges are treated as undirected: a node is adjacent to its ``next`` node and
to each of its ``prev`` nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from modgraph.errors import SubgraphConflict

UNASSIGNED = -1


class Adjacency(Protocol):
    """What partitioning needs from a graph."""

    def __len__(self) -> int: ...

    def next(self, i: int) -> int: ...

    def prev(self, i: int) -> Sequence[int]: ...


@dataclass
class Subgraph:
    """One connected component.

    Attributes:
        id: Subgraph id; ids are numbered in order of each component's
            smallest node.
        members: Node indices in ascending order.
    """

    id: int
    members: list[int] = field(default_factory=list)

    def __contains__(self, node: int) -> bool:
        return node in self.members

    def __len__(self) -> int:
        return len(self.members)


def assign_subgraphs(graph: Adjacency) -> list[int]:
    """Assign a subgraph id to every node.

    Nodes are scanned in index order and each unassigned node opens a new
    subgraph. The subgraph is grown depth-first from an explicit stack,
    visiting ``next`` before the ``prev`` nodes in stored order.

    Returns:
        ``ids[i]`` is the subgraph id of node ``i``.

    Raises:
        SubgraphConflict: a neighbour already carries a different id.
    """
    m = len(graph)
    ids: list[int] = [UNASSIGNED] * m
    subgraph_count = 0

    for start in range(m):
        if ids[start] != UNASSIGNED:
            continue
        sid = subgraph_count
        subgraph_count += 1

        ids[start] = sid
        stack = [start]
        while stack:
            node = stack.pop()
            neighbours = [graph.next(node), *graph.prev(node)]
            # Reverse so that ``next`` is popped first.
            for nb in reversed(neighbours):
                current = ids[nb]
                if current == UNASSIGNED:
                    ids[nb] = sid
                    stack.append(nb)
                elif current != sid:
                    raise SubgraphConflict(nb, current, sid)

    return ids


def compute_partition(graph: Adjacency) -> list[Subgraph]:
    """Partition ``graph`` into connected subgraphs, ordered by id."""
    ids = assign_subgraphs(graph)
    subgraphs: list[Subgraph] = []
    for node, sid in enumerate(ids):
        if sid == len(subgraphs):
            subgraphs.append(Subgraph(id=sid))
        subgraphs[sid].members.append(node)
    return subgraphs
