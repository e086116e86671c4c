"""Tests for the layout pipeline (layout/__init__.py) and layout types.

Covers:
  - full_layout with and without partition
  - LayoutNode records handed to renderers (next, subgraph, complement)
  - determinism for a fixed seed
  - LayoutResult.biggest_radius
"""

from __future__ import annotations

import numpy as np
import pytest

from modgraph.errors import InvalidModulus
from modgraph.layout import (
    LayoutNode,
    LayoutResult,
    PotentialScales,
    Strategy,
    full_layout,
)


class TestFullLayout:
    def test_partition_variant(self):
        """m=10 with partition: every node carries its subgraph id."""
        result = full_layout(10, seed=0, partition=True)
        assert result.modulus == 10
        assert [n.index for n in result.nodes] == list(range(10))
        assert [n.next for n in result.nodes] == [0, 1, 4, 9, 6, 5, 6, 9, 4, 1]
        assert [n.subgraph for n in result.nodes] == [0, 1, 2, 1, 2, 3, 2, 1, 2, 1]
        assert result.subgraphs is not None
        assert len(result.subgraphs) == 4

    def test_plain_variant(self):
        """Without partition there are no subgraph ids."""
        result = full_layout(6, seed=0)
        assert result.subgraphs is None
        assert all(n.subgraph is None for n in result.nodes)

    def test_complement(self):
        """Complement is m - i, undefined for 0 and m/2."""
        result = full_layout(10, seed=0)
        complements = [n.complement for n in result.nodes]
        assert complements == [None, 9, 8, 7, 6, None, 4, 3, 2, 1]

    def test_positions_finite(self):
        """Final positions are plain finite floats."""
        result = full_layout(7, seed=5)
        for n in result.nodes:
            assert len(n.position) == 3
            assert all(isinstance(c, float) for c in n.position)
            assert np.all(np.isfinite(n.position))

    def test_deterministic_with_seed(self):
        """The same seed gives the same layout."""
        a = full_layout(5, seed=42)
        b = full_layout(5, seed=42)
        assert [n.position for n in a.nodes] == [n.position for n in b.nodes]
        assert a.potential == b.potential

    def test_simplex_strategy(self):
        """The simplex strategy runs through the same pipeline."""
        result = full_layout(3, strategy=Strategy.SIMPLEX, seed=1)
        assert len(result.nodes) == 3
        assert result.iterations > 0

    def test_custom_scales(self):
        """A stronger factor spring holds nodes 0 and 1 closer together."""
        loose = full_layout(2, seed=2, scales=PotentialScales(factor_attract=150.0))
        tight = full_layout(2, seed=2, scales=PotentialScales(factor_attract=15.0))

        def gap(result: LayoutResult) -> float:
            return float(np.linalg.norm(np.subtract(result.nodes[1].position, result.nodes[0].position)))

        assert gap(tight) < gap(loose)

    def test_include_one(self):
        """Counting 1 as a factor adds springs between nodes 0 and 1."""

        def gap(result: LayoutResult) -> float:
            return float(np.linalg.norm(np.subtract(result.nodes[1].position, result.nodes[0].position)))

        plain = full_layout(2, seed=4)
        with_one = full_layout(2, seed=4, include_one=True)
        assert gap(with_one) < gap(plain)

    def test_empty(self):
        """m=0 lays out nothing."""
        result = full_layout(0, partition=True)
        assert result.nodes == []
        assert result.subgraphs == []
        assert result.converged

    def test_negative_modulus(self):
        """m < 0 fails before any minimization."""
        with pytest.raises(InvalidModulus):
            full_layout(-1)

    def test_iteration_cap(self):
        """A capped run still yields positions, flagged as unconverged."""
        result = full_layout(6, seed=0, max_iterations=1)
        assert not result.converged
        assert len(result.nodes) == 6


class TestLayoutResult:
    def test_biggest_radius(self):
        """Largest distance of any node from the origin."""
        result = LayoutResult(
            modulus=2,
            nodes=[
                LayoutNode(index=0, position=(3.0, 4.0, 0.0), next=0),
                LayoutNode(index=1, position=(1.0, 0.0, 0.0), next=1),
            ],
        )
        assert result.biggest_radius() == pytest.approx(5.0)

    def test_biggest_radius_empty(self):
        """No nodes, zero radius."""
        assert LayoutResult(modulus=0).biggest_radius() == 0.0

    def test_layout_node_frozen(self):
        """Renderers get read-only node records."""
        node = LayoutNode(index=0, position=(0.0, 0.0, 0.0), next=0)
        with pytest.raises(AttributeError):
            node.next = 1  # type: ignore[misc]
