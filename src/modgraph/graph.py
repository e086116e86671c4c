"""Graph of squares under modular arithmetic.

Every node ``i`` in ``0..m-1`` has exactly one outgoing edge, to
``i*i mod m``, and any number of incoming edges (its modular square roots).
The edge structure is fixed at construction; positions live elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from modgraph.errors import InvalidModulus
from modgraph.numtheory import next_of


@dataclass
class Node:
    """Connectivity of one node.

    Attributes:
        index: The integer this node represents.
        next: Index of the node ``index`` maps to.
        prev: Indices of the nodes mapping to ``index``, in ascending order.
    """

    index: int
    next: int = 0
    prev: list[int] = field(default_factory=list)


class Graph:
    """Directed functional graph of ``x -> x*x mod m``."""

    def __init__(self, m: int) -> None:
        if m < 0:
            raise InvalidModulus(m)
        self.modulus = m
        self.nodes: list[Node] = [Node(index=i) for i in range(m)]

        # Establish all interconnections among nodes.
        for i in range(m):
            j = next_of(i, m)
            self.nodes[i].next = j
            self.nodes[j].prev.append(i)

    def __len__(self) -> int:
        return self.modulus

    def __repr__(self) -> str:
        return f"Graph(m={self.modulus})"

    def size(self) -> int:
        """Number of nodes, equal to the modulus."""
        return self.modulus

    def next(self, i: int) -> int:
        """Index of the node pointed to by node ``i``."""
        return self.nodes[i].next

    def prev(self, i: int) -> tuple[int, ...]:
        """Indices of the nodes pointing to node ``i``, possibly empty."""
        return tuple(self.nodes[i].prev)

    def complement(self, i: int) -> int | None:
        """Node ``m - i``, or None when that is ``m`` itself or ``i``."""
        c = self.modulus - i
        if c == self.modulus or c == i:
            return None
        return c

    def to_digraph(self) -> nx.DiGraph:
        """Build a networkx DiGraph with one ``i -> next(i)`` edge per node.

        Self-loops (``0 -> 0``, ``1 -> 1``, ...) are kept.
        """
        g: nx.DiGraph = nx.DiGraph()
        for node in self.nodes:
            g.add_node(node.index, next=node.next)
        for node in self.nodes:
            g.add_edge(node.index, node.next)
        return g
