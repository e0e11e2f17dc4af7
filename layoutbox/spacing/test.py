"""Unit tests for spacing and inset values."""

import pytest

from layoutbox.spacing import (
    EdgeSpacing,
    Insets,
    Spacing,
    SpacingMode,
    fixed,
    flexible,
)


class TestSpacing:
    """Tests for Spacing values."""

    @pytest.mark.unit
    def test_constructors(self):
        """fixed() and flexible() tag the mode."""
        assert fixed(5) == Spacing(mode=SpacingMode.FIXED, value=5)
        assert flexible(10).mode == SpacingMode.FLEXIBLE
        assert flexible(10).value == 10.0

    @pytest.mark.unit
    def test_fixed_and_flexible_differ(self):
        """Same value with different modes is not equal."""
        assert fixed(5) != flexible(5)


class TestEdgeSpacing:
    """Tests for per-edge spacing."""

    @pytest.mark.unit
    def test_all_edges_default_to_none(self):
        """Unset edges stay None."""
        edges = EdgeSpacing()
        assert edges.leading is None
        assert edges.top is None
        assert edges.trailing is None
        assert edges.bottom is None

    @pytest.mark.unit
    def test_with_edge_keeps_other_edges(self):
        """Replacing one edge leaves the rest untouched."""
        edges = EdgeSpacing(leading=flexible(5))
        updated = edges.with_edge("trailing", flexible(5))
        assert updated.leading == flexible(5)
        assert updated.trailing == flexible(5)
        assert edges.trailing is None

    @pytest.mark.unit
    def test_with_edge_rejects_unknown_edge(self):
        """Only the four edge names are accepted."""
        with pytest.raises(ValueError, match="Unknown edge"):
            EdgeSpacing().with_edge("middle", fixed(1))


class TestInsets:
    """Tests for content insets."""

    @pytest.mark.unit
    def test_defaults_are_zero(self):
        """Missing edges are zero."""
        assert Insets() == Insets(top=0, leading=0, bottom=0, trailing=0)

    @pytest.mark.unit
    def test_uniform(self):
        """uniform() applies the same value to every edge."""
        insets = Insets.uniform(10)
        assert (insets.top, insets.leading, insets.bottom, insets.trailing) == (
            10,
            10,
            10,
            10,
        )

    @pytest.mark.unit
    def test_negative_values_pass_through(self):
        """Insets are not range checked."""
        assert Insets.uniform(-3).top == -3
