"""Exceptions raised by modgraph."""

from __future__ import annotations


class ModgraphError(Exception):
    """Base class for every error raised by modgraph."""


class InvalidModulus(ModgraphError, ValueError):
    """The modulus of a graph of squares must be non-negative."""

    def __init__(self, modulus: int) -> None:
        super().__init__(f"illegal modulus: {modulus}")
        self.modulus = modulus


class SubgraphConflict(ModgraphError, RuntimeError):
    """A node reached during partition already belongs to another subgraph.

    Adjacency built by ``Graph`` is symmetric, so this indicates a logic error
    in whatever produced the node links.
    """

    def __init__(self, node: int, existing: int, incoming: int) -> None:
        super().__init__(f"conflict between subgraphs: node {node} is in subgraph {existing}, reached from {incoming}")
        self.node = node
        self.existing = existing
        self.incoming = incoming


class InvalidDimension(ModgraphError, ValueError):
    """A flattened position vector whose length is not a multiple of three."""

    def __init__(self, size: int) -> None:
        super().__init__(f"size not multiple of three: {size}")
        self.size = size
