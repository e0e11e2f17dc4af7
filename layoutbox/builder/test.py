"""Unit tests for the builder facade and fluent builders."""

import pytest

from layoutbox.builder import (
    BoxConfig,
    GroupBox,
    ItemBox,
    LayoutBuilder,
    choose_first,
    choose_second,
    combine,
    from_array,
    optional,
)
from layoutbox.dimension import LayoutSize, absolute, h, w
from layoutbox.node import Direction, Fragment, Group, Slot, flatten
from layoutbox.spacing import EdgeSpacing, Insets, fixed, flexible


def _slot(width: float) -> Slot:
    return Slot(size=LayoutSize(width=w(width), height=h(1.0)))


def _widths(children) -> list[float]:
    return [child.size.width.value for child in children]


class TestLayoutBuilder:
    """Tests for the block resolution operations."""

    @pytest.mark.unit
    def test_single_component_passes_through(self):
        """A block of one statement yields that node, not a fragment."""
        slot = _slot(0.5)
        assert combine(slot) is slot

    @pytest.mark.unit
    def test_sequential_components_become_fragment(self):
        """Several statements are wrapped in order."""
        a, b, c = _slot(0.1), _slot(0.2), _slot(0.3)
        result = combine(a, b, c)
        assert isinstance(result, Fragment)
        assert result.items == (a, b, c)

    @pytest.mark.unit
    def test_either_branches_pass_through(self):
        """Taken if/else branches return their component unchanged."""
        a, b = _slot(0.1), _slot(0.2)
        assert choose_first(a) is a
        assert choose_second(b) is b

    @pytest.mark.unit
    def test_optional_none_is_empty_fragment(self):
        """An untaken if-without-else contributes an empty fragment."""
        assert optional(None) == Fragment()
        slot = _slot(0.1)
        assert optional(slot) is slot

    @pytest.mark.unit
    def test_array_keeps_iteration_order(self):
        """Loop results are wrapped in iteration order."""
        slots = [_slot(i / 10) for i in range(1, 5)]
        result = from_array(slots)
        assert list(result.items) == slots

    @pytest.mark.unit
    def test_empty_array_is_empty_fragment(self):
        """A loop with zero iterations flattens to nothing."""
        assert flatten(from_array([])) == []

    @pytest.mark.unit
    def test_component_builds_builders(self):
        """Builders are frozen into nodes when they become components."""
        node = LayoutBuilder.component(ItemBox(w(0.5), h(1.0), columns=3))
        assert isinstance(node, Slot)
        assert node.replica_count == 3

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["text", b"bytes", 42, 1.5, object()])
    def test_component_rejects_non_nodes(self, value):
        """Strings, numbers and arbitrary objects cannot appear in a block."""
        with pytest.raises(TypeError, match="cannot appear in a layout block"):
            LayoutBuilder.component(value)

    @pytest.mark.unit
    def test_evaluate_requires_callable(self):
        """Blocks must be callables."""
        with pytest.raises(TypeError, match="must be callable"):
            LayoutBuilder.evaluate([_slot(0.1)])  # type: ignore[arg-type]

    @pytest.mark.unit
    def test_evaluate_generator_block(self):
        """Generator blocks are resolved as sequential statements."""
        a, b = _slot(0.1), _slot(0.2)

        def block():
            yield a
            yield b

        assert flatten(LayoutBuilder.evaluate(block)) == [a, b]

    @pytest.mark.unit
    def test_evaluate_list_and_single_values(self):
        """Blocks may return a list, a tuple, one node or None."""
        a, b = _slot(0.1), _slot(0.2)
        assert flatten(LayoutBuilder.evaluate(lambda: [a, b])) == [a, b]
        assert flatten(LayoutBuilder.evaluate(lambda: (a, b))) == [a, b]
        assert LayoutBuilder.evaluate(lambda: a) is a
        assert flatten(LayoutBuilder.evaluate(lambda: None)) == []

    @pytest.mark.unit
    def test_evaluate_yielded_list_is_a_loop(self):
        """A list yielded from a generator behaves like a loop result."""
        slots = [_slot(0.1), _slot(0.2)]
        tail = _slot(0.3)

        def block():
            yield slots
            yield tail

        assert flatten(LayoutBuilder.evaluate(block)) == [*slots, tail]


class TestBoxConfig:
    """Tests for the shared builder base."""

    @pytest.mark.unit
    def test_box_config_is_abstract(self):
        """BoxConfig cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            BoxConfig(w(1.0), h(1.0))  # type: ignore

    @pytest.mark.unit
    def test_subclass_requires_build(self):
        """Concrete builders must implement build."""

        class IncompleteBox(BoxConfig):
            pass

        with pytest.raises(TypeError, match="abstract"):
            IncompleteBox(w(1.0), h(1.0))


class TestItemBox:
    """Tests for the Slot builder."""

    @pytest.mark.unit
    def test_build_defaults(self):
        """A fresh item builds to a single unconfigured slot."""
        slot = ItemBox(w(0.3), h(1.0)).build()
        assert slot.size == LayoutSize(width=w(0.3), height=h(1.0))
        assert slot.replica_count == 1
        assert slot.insets is None
        assert slot.edge_spacing is None

    @pytest.mark.unit
    def test_configuration_chains(self):
        """Every configuration call returns the same builder."""
        box = ItemBox(w(0.3), h(1.0))
        assert box.insets(space=4) is box
        assert box.leading(fixed(1)) is box
        assert box.size(absolute(10), absolute(20)) is box

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({"space": 10}, Insets.uniform(10)),
            ({"insets": 3}, Insets.uniform(3)),
            ({"insets": Insets(top=1, bottom=2)}, Insets(top=1, bottom=2)),
            ({"top": 1, "trailing": 4}, Insets(top=1, trailing=4)),
        ],
    )
    def test_insets_forms(self, kwargs, expected):
        """Insets accept a value, a number, `space=` or per-edge keywords."""
        slot = ItemBox(w(1.0), h(1.0)).insets(**kwargs).build()
        assert slot.insets == expected

    @pytest.mark.unit
    def test_edge_setters_accumulate(self):
        """Per-edge setters fill in one EdgeSpacing."""
        slot = (
            ItemBox(w(1.0), h(1.0))
            .leading(fixed(2))
            .bottom(flexible(8))
            .build()
        )
        assert slot.edge_spacing == EdgeSpacing(leading=fixed(2), bottom=flexible(8))

    @pytest.mark.unit
    def test_edges_replaces_all(self):
        """edges() overwrites previously set edges."""
        slot = (
            ItemBox(w(1.0), h(1.0))
            .top(fixed(1))
            .edges(EdgeSpacing(trailing=fixed(5)))
            .build()
        )
        assert slot.edge_spacing == EdgeSpacing(trailing=fixed(5))

    @pytest.mark.unit
    def test_later_mutation_does_not_reach_built_slot(self):
        """Configuration is captured at build time."""
        box = ItemBox(w(0.5), h(1.0)).insets(space=1)
        first = box.build()
        box.insets(space=9)
        assert first.insets == Insets.uniform(1)
        assert box.build().insets == Insets.uniform(9)


class TestGroupBox:
    """Tests for the Group builder."""

    @pytest.mark.unit
    def test_children_in_source_order(self):
        """Statements, branches and loops keep source order."""

        def block():
            yield ItemBox(w(0.1), h(1.0))
            for i in range(2, 5):
                yield ItemBox(w(i / 10), h(1.0))
            yield ItemBox(w(0.5), h(1.0))

        group = GroupBox(w(1.0), h(1.0), block)
        assert _widths(group.children) == [0.1, 0.2, 0.3, 0.4, 0.5]

    @pytest.mark.unit
    @pytest.mark.parametrize(("flag", "expected"), [(True, 0.1), (False, 0.9)])
    def test_if_else_takes_exactly_one_branch(self, flag, expected):
        """Only the taken branch contributes children."""

        def block():
            if flag:
                yield ItemBox(w(0.1), h(1.0))
            else:
                yield ItemBox(w(0.9), h(1.0))

        group = GroupBox(w(1.0), h(1.0), block)
        assert _widths(group.children) == [expected]

    @pytest.mark.unit
    def test_untaken_optional_contributes_nothing(self):
        """An if without else that is not taken leaves no trace."""
        show_badge = False

        def block():
            yield ItemBox(w(0.5), h(1.0))
            if show_badge:
                yield ItemBox(w(0.1), h(1.0))

        group = GroupBox(w(1.0), h(1.0), block)
        assert _widths(group.children) == [0.5]

    @pytest.mark.unit
    def test_empty_loop_next_to_items(self):
        """A zero-iteration loop between items is tolerated."""

        def block():
            yield ItemBox(w(0.1), h(1.0))
            yield [ItemBox(w(0.5), h(1.0)) for _ in range(0)]
            yield ItemBox(w(0.2), h(1.0))

        group = GroupBox(w(1.0), h(1.0), block)
        assert _widths(group.children) == [0.1, 0.2]

    @pytest.mark.unit
    def test_children_contain_no_fragments(self):
        """Construction always flattens fragments away."""
        group = GroupBox(
            w(1.0),
            h(1.0),
            lambda: [[ItemBox(w(0.1), h(1.0))], [[ItemBox(w(0.2), h(1.0))]]],
        )
        assert all(isinstance(c, (Slot, Group)) for c in group.children)
        assert _widths(group.children) == [0.1, 0.2]

    @pytest.mark.unit
    def test_nested_group_becomes_group_child(self, nested_layout):
        """A GroupBox in a block becomes a Group child."""
        first, second = nested_layout.children
        assert isinstance(first, Slot)
        assert first.replica_count == 2
        assert isinstance(second, Group)
        assert second.direction == Direction.VERTICAL

    @pytest.mark.unit
    def test_direction_constructors(self):
        """horizontal()/vertical() set the direction, strings are accepted."""
        block = lambda: ItemBox(w(1.0), h(1.0))  # noqa: E731
        assert GroupBox.horizontal(w(1.0), h(1.0), block).direction == Direction.HORIZONTAL
        assert GroupBox.vertical(w(1.0), h(1.0), block).direction == Direction.VERTICAL
        assert GroupBox(w(1.0), h(1.0), block, direction="vertical").direction == (
            Direction.VERTICAL
        )

    @pytest.mark.unit
    def test_invalid_direction_raises(self):
        """Unknown directions are rejected."""
        with pytest.raises(ValueError):
            GroupBox(w(1.0), h(1.0), lambda: None, direction="diagonal")

    @pytest.mark.unit
    def test_block_called_once(self):
        """The block runs exactly once, during construction."""
        calls = []

        def block():
            calls.append(1)
            return ItemBox(w(1.0), h(1.0))

        group = GroupBox(w(1.0), h(1.0), block)
        group.build()
        group.build()
        assert len(calls) == 1

    @pytest.mark.unit
    def test_builder_changes_after_capture_are_ignored(self):
        """Mutating an item builder after the group captured it has no effect."""
        item = ItemBox(w(0.5), h(1.0)).insets(space=1)
        group = GroupBox(w(1.0), h(1.0), lambda: item)
        item.insets(space=50)
        assert group.children[0].insets == Insets.uniform(1)

    @pytest.mark.unit
    def test_generator_reconfiguring_one_builder(self):
        """Each yield of a reused builder captures its state at that moment."""

        def block():
            item = ItemBox(w(0.5), h(1.0))
            for i in range(3):
                yield item.insets(space=i)

        group = GroupBox(w(1.0), h(1.0), block)
        assert [child.insets.top for child in group.children] == [0, 1, 2]

    @pytest.mark.unit
    def test_generator_mutation_after_yield_is_ignored(self):
        """Changes made later in the same generator do not reach a yielded item."""

        def block():
            item = ItemBox(w(0.5), h(1.0)).insets(space=1)
            yield item
            item.insets(space=50)

        group = GroupBox(w(1.0), h(1.0), block)
        assert len(group.children) == 1
        assert group.children[0].insets == Insets.uniform(1)

    @pytest.mark.unit
    def test_build_carries_configuration(self):
        """build() freezes size, insets, edges and spacing."""
        group = (
            GroupBox.vertical(w(1.0), absolute(200), lambda: ItemBox(w(1.0), h(0.5)))
            .insets(space=5)
            .top(fixed(3))
            .space(fixed(8))
            .build()
        )
        assert group.direction == Direction.VERTICAL
        assert group.size.height == absolute(200)
        assert group.insets == Insets.uniform(5)
        assert group.edge_spacing == EdgeSpacing(top=fixed(3))
        assert group.inter_item_spacing == fixed(8)
        assert len(group.children) == 1

    @pytest.mark.unit
    def test_empty_block_builds_empty_group(self):
        """An empty block is legal at construction time."""
        group = GroupBox(w(1.0), h(1.0), lambda: None)
        assert group.children == ()
        assert group.build().children == ()
