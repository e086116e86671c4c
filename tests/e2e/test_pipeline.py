"""End-to-end: modulus in, laid-out graph and neato or Asymptote text out."""

import logging

import numpy as np
import pytest

from modgraph.api import layout_modulus, render_asy, render_neato
from modgraph.graph import Graph
from modgraph.layout import GRADIENT_TOLERANCE, PotentialModel


@pytest.mark.parametrize("m", [3, 5, 8])
def test_layout_reaches_equilibrium(m: int, caplog: pytest.LogCaptureFixture) -> None:
    """Either every node is at rest within tolerance, or the run says otherwise."""
    caplog.set_level(logging.INFO, logger="modgraph")
    result = layout_modulus(m, seed=m)
    positions = np.array([n.position for n in result.nodes])
    forces = PotentialModel(Graph(m)).evaluate(positions).net_forces
    if result.converged:
        assert np.max(np.linalg.norm(forces, axis=1)) < GRADIENT_TOLERANCE
    else:
        assert "did not converge" in caplog.text


def test_render_neato_modulus_ten() -> None:
    """m=10 renders four clusters with every squaring edge."""
    out = render_neato(10, seed=0)
    assert out.count("subgraph cluster_") == 4
    for i in range(10):
        assert f"{i} -> {(i * i) % 10} [color=" in out


def test_render_asy_modulus_seven() -> None:
    """m=7 renders a sphere per node and an arrow per non-fixed node."""
    out = render_asy(7, seed=0)
    assert out.count("unitsphere") == 7
    # 0 and 1 map to themselves.
    assert out.count("arrow=Arrow3()") == 5
