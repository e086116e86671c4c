"""modgraph — 3-D layout of the graph of squares under modular arithmetic."""

from modgraph.errors import InvalidDimension, InvalidModulus, ModgraphError, SubgraphConflict
from modgraph.graph import Graph, Node
from modgraph.layout import LayoutNode, LayoutResult, Minimizer, PotentialModel, PotentialScales, Strategy, full_layout
from modgraph.numtheory import factors_of, next_of
from modgraph.partition import Subgraph, assign_subgraphs, compute_partition

__all__ = [
    "Graph",
    "InvalidDimension",
    "InvalidModulus",
    "LayoutNode",
    "LayoutResult",
    "Minimizer",
    "ModgraphError",
    "Node",
    "PotentialModel",
    "PotentialScales",
    "Strategy",
    "Subgraph",
    "SubgraphConflict",
    "assign_subgraphs",
    "compute_partition",
    "factors_of",
    "full_layout",
    "next_of",
]
