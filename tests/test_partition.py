"""Tests for partition.py — connected subgraphs of the graph of squares."""

from __future__ import annotations

import networkx as nx
import pytest

from modgraph.errors import SubgraphConflict
from modgraph.graph import Graph
from modgraph.partition import Subgraph, assign_subgraphs, compute_partition

# ─── Helpers ──────────────────────────────────────────────────────────────────


class SkewedAdjacency:
    """Adjacency whose prev lists do not invert next.

    Node 1 points at node 0, but node 0 does not list 1 as a predecessor, so
    node 0's subgraph is closed before node 1 is reached.
    """

    def __len__(self) -> int:
        return 2

    def next(self, i: int) -> int:
        return 0

    def prev(self, i: int) -> tuple[int, ...]:
        return (0,) if i == 0 else ()


# ─── Partition Tests ──────────────────────────────────────────────────────────


class TestComputePartition:
    def test_modulus_ten(self):
        """m=10 splits into the components of 0, 1, 2 and 5."""
        subgraphs = compute_partition(Graph(10))
        assert [sg.members for sg in subgraphs] == [[0], [1, 3, 7, 9], [2, 4, 6, 8], [5]]
        assert [sg.id for sg in subgraphs] == [0, 1, 2, 3]

    def test_prime_modulus(self):
        """m=7: 2 and 4 form a 2-cycle fed by 3 and 5; 6 feeds the fixed point 1."""
        subgraphs = compute_partition(Graph(7))
        assert [sg.members for sg in subgraphs] == [[0], [1, 6], [2, 3, 4, 5]]

    def test_empty_graph(self):
        """m=0 has no subgraphs."""
        assert compute_partition(Graph(0)) == []

    def test_single_node(self):
        """m=1 is one subgraph holding node 0."""
        assert compute_partition(Graph(1)) == [Subgraph(id=0, members=[0])]

    @pytest.mark.parametrize("m", range(1, 60))
    def test_matches_weak_components(self, m: int):
        """Subgraphs are exactly networkx's weakly connected components."""
        g = Graph(m)
        ours = sorted(frozenset(sg.members) for sg in compute_partition(g))
        theirs = sorted(frozenset(c) for c in nx.weakly_connected_components(g.to_digraph()))
        assert ours == theirs

    @pytest.mark.parametrize("m", [12, 30, 64, 97])
    def test_total_and_disjoint(self, m: int):
        """Every node has exactly one id, shared along every edge."""
        g = Graph(m)
        ids = assign_subgraphs(g)
        assert len(ids) == m
        assert all(sid >= 0 for sid in ids)
        for i in range(m):
            assert ids[i] == ids[g.next(i)]
            for p in g.prev(i):
                assert ids[i] == ids[p]
        members = [n for sg in compute_partition(g) for n in sg.members]
        assert sorted(members) == list(range(m))

    def test_ids_follow_smallest_member(self):
        """Subgraph ids increase with each subgraph's smallest node."""
        subgraphs = compute_partition(Graph(105))
        smallest = [sg.members[0] for sg in subgraphs]
        assert smallest == sorted(smallest)

    def test_deterministic(self):
        """Two runs over the same graph agree."""
        g = Graph(48)
        assert compute_partition(g) == compute_partition(g)

    def test_large_modulus_no_recursion_limit(self):
        """A big component is traversed without hitting the recursion limit."""
        subgraphs = compute_partition(Graph(4099))
        assert sum(len(sg) for sg in subgraphs) == 4099


class TestSubgraphConflict:
    def test_conflict_raised(self):
        """Asymmetric adjacency is reported, not silently merged."""
        with pytest.raises(SubgraphConflict) as excinfo:
            assign_subgraphs(SkewedAdjacency())
        assert excinfo.value.node == 0
        assert excinfo.value.existing == 0
        assert excinfo.value.incoming == 1


class TestSubgraph:
    def test_contains_and_len(self):
        """Subgraph supports membership tests and len()."""
        sg = Subgraph(id=2, members=[1, 3, 7, 9])
        assert 7 in sg
        assert 2 not in sg
        assert len(sg) == 4
