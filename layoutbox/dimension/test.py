"""Unit tests for dimension values."""

import pytest
from pydantic import ValidationError

from layoutbox.dimension import (
    Dimension,
    DimensionMode,
    LayoutSize,
    absolute,
    estimated,
    fractional_height,
    fractional_width,
    h,
    w,
)


class TestDimensionMode:
    """Tests for DimensionMode enum."""

    @pytest.mark.unit
    def test_enum_values(self):
        """All expected modes exist."""
        assert DimensionMode.FRACTIONAL_WIDTH.value == "fractional_width"
        assert DimensionMode.FRACTIONAL_HEIGHT.value == "fractional_height"
        assert DimensionMode.ABSOLUTE.value == "absolute"
        assert DimensionMode.ESTIMATED.value == "estimated"


class TestConstructors:
    """Tests for the shorthand constructors."""

    @pytest.mark.unit
    def test_w_is_fractional_width(self):
        """w() is equivalent to fractional_width()."""
        assert w(0.3) == fractional_width(0.3)
        assert w(0.3).mode == DimensionMode.FRACTIONAL_WIDTH
        assert w(0.3).value == 0.3

    @pytest.mark.unit
    def test_h_is_fractional_height(self):
        """h() is equivalent to fractional_height()."""
        assert h(1.0) == fractional_height(1.0)
        assert h(1.0).mode == DimensionMode.FRACTIONAL_HEIGHT

    @pytest.mark.unit
    def test_absolute_and_estimated(self):
        """Length-based constructors keep the value."""
        assert absolute(110) == Dimension(mode=DimensionMode.ABSOLUTE, value=110)
        assert estimated(44).mode == DimensionMode.ESTIMATED
        assert estimated(44).value == 44.0

    @pytest.mark.unit
    def test_out_of_range_values_pass_through(self):
        """Oversized and negative values are not validated."""
        assert w(2.0).value == 2.0
        assert h(-0.5).value == -0.5
        assert absolute(-10).value == -10


class TestValueSemantics:
    """Dimensions behave as immutable values."""

    @pytest.mark.unit
    def test_frozen(self):
        """Assigning to a field raises."""
        dim = w(0.5)
        with pytest.raises(ValidationError):
            dim.value = 0.6

    @pytest.mark.unit
    def test_hashable_and_equal(self):
        """Equal dimensions hash alike."""
        assert {w(0.5), w(0.5), h(0.5)} == {w(0.5), h(0.5)}

    @pytest.mark.unit
    def test_layout_size_equality(self):
        """LayoutSize compares by both dimensions."""
        first = LayoutSize(width=w(1.0), height=absolute(100))
        second = LayoutSize(width=w(1.0), height=absolute(100))
        assert first == second
        assert first != LayoutSize(width=w(1.0), height=absolute(101))
