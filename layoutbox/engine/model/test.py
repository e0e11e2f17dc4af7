"""Unit tests for the model engine."""

import pytest
from pydantic import ValidationError

from layoutbox.dimension import LayoutSize, absolute, h, w
from layoutbox.engine.model import CompositionalLayout, Item, ItemGroup, ModelEngine, Section
from layoutbox.node import Direction
from layoutbox.spacing import EdgeSpacing, Insets, fixed, flexible

SIZE = LayoutSize(width=w(0.5), height=h(1.0))


@pytest.fixture
def engine():
    """Create a ModelEngine instance."""
    return ModelEngine()


class TestModelEngine:
    """Tests for ModelEngine."""

    @pytest.mark.unit
    def test_engine_name(self, engine):
        """Engine has correct name and supports repeats."""
        assert engine.name == "model"
        assert engine.supports_repeated_items is True

    @pytest.mark.unit
    def test_make_item(self, engine):
        """Items start with zero insets and no edge spacing."""
        item = engine.make_item(SIZE)
        assert isinstance(item, Item)
        assert item.layout_size == SIZE
        assert item.content_insets == Insets()
        assert item.edge_spacing is None

    @pytest.mark.unit
    def test_make_group_keeps_order(self, engine):
        """Subitems are stored in the given order."""
        a = engine.make_item(SIZE)
        b = engine.make_item(LayoutSize(width=absolute(10), height=h(1.0)))
        group = engine.make_group(Direction.VERTICAL, SIZE, [a, b])
        assert group.subitems == (a, b)
        assert group.direction == Direction.VERTICAL
        assert group.repeat_count is None
        assert group.effective_subitems == [a, b]

    @pytest.mark.unit
    def test_make_repeated_group(self, engine):
        """Repeated groups store one item and expand it on demand."""
        item = engine.make_item(SIZE)
        group = engine.make_repeated_group(Direction.HORIZONTAL, SIZE, item, 3)
        assert group.subitems == (item,)
        assert group.repeat_count == 3
        assert group.effective_subitems == [item, item, item]

    @pytest.mark.unit
    def test_with_methods_return_copies(self, engine):
        """Configuration returns new objects and leaves the original intact."""
        item = engine.make_item(SIZE)
        inset = engine.with_content_insets(item, Insets.uniform(4))
        edged = engine.with_edge_spacing(inset, EdgeSpacing(top=flexible(2)))
        assert item.content_insets == Insets()
        assert inset.content_insets == Insets.uniform(4)
        assert edged.edge_spacing == EdgeSpacing(top=flexible(2))
        assert edged.content_insets == Insets.uniform(4)

        group = engine.make_group(Direction.HORIZONTAL, SIZE, [item])
        spaced = engine.with_inter_item_spacing(group, fixed(5))
        assert group.inter_item_spacing is None
        assert spaced.inter_item_spacing == fixed(5)

    @pytest.mark.unit
    def test_models_are_frozen(self, engine):
        """Host objects cannot be mutated."""
        item = engine.make_item(SIZE)
        with pytest.raises(ValidationError):
            item.layout_size = SIZE

    @pytest.mark.unit
    def test_section_and_layout(self, engine):
        """Sections default to zero insets and spacing; layouts keep order."""
        group = engine.make_group(Direction.HORIZONTAL, SIZE, [engine.make_item(SIZE)])
        plain = engine.make_section(group)
        spaced = engine.make_section(group, Insets.uniform(8), inter_group_spacing=12)

        assert isinstance(plain, Section)
        assert plain.content_insets == Insets()
        assert plain.inter_group_spacing == 0.0
        assert spaced.content_insets == Insets.uniform(8)
        assert spaced.inter_group_spacing == 12

        layout = engine.make_layout([plain, spaced])
        assert isinstance(layout, CompositionalLayout)
        assert layout.sections == (plain, spaced)

    @pytest.mark.unit
    def test_nested_groups(self, engine):
        """Groups accept nested groups as subitems."""
        inner = engine.make_group(Direction.VERTICAL, SIZE, [engine.make_item(SIZE)])
        outer = engine.make_group(Direction.HORIZONTAL, SIZE, [engine.make_item(SIZE), inner])
        assert isinstance(outer.subitems[1], ItemGroup)
        assert outer.subitems[1].direction == Direction.VERTICAL
