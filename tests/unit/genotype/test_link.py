"""
Unit tests for the Link class.

Tests cover initialization and string representations.
"""

import pytest

from neatgraph.genotype import Link


class TestLinkInit:
    """Test Link initialization."""

    def test_basic_initialization(self):
        """Test standard initialization with all parameters."""
        link = Link(node_in=1, node_out=2, weight=0.5, innovation=10, enabled=True)

        assert link.node_in == 1
        assert link.node_out == 2
        assert link.weight == 0.5
        assert link.innovation == 10
        assert link.enabled is True

    def test_default_enabled_true(self):
        """Test that enabled defaults to True when not specified."""
        link = Link(node_in=1, node_out=2, weight=0.5, innovation=10)
        assert link.enabled is True

    def test_explicit_disabled(self):
        link = Link(node_in=1, node_out=2, weight=0.5, innovation=10, enabled=False)
        assert link.enabled is False

    def test_self_loop(self):
        """Test that a link may start and end at the same node."""
        link = Link(node_in=3, node_out=3, weight=-1.0, innovation=1)
        assert link.node_in == link.node_out == 3


class TestLinkStringRepresentation:

    def test_str_enabled(self):
        assert str(Link(0, 2, 2.0, 1)) == "[001,E,00=>02,+2.00]"

    def test_str_disabled(self):
        assert str(Link(1, 3, -1.0, 4, enabled=False)) == "[004,D,01=>03,-1.00]"

    def test_repr(self):
        r = repr(Link(0, 2, 2.0, 1))
        assert r.startswith("Link(")
        assert "innovation=001" in r
        assert "enabled=True" in r
