"""Unit tests for the node model and flattener."""

import pytest
from pydantic import ValidationError

from layoutbox.dimension import LayoutSize, absolute, h, w
from layoutbox.node import Direction, Fragment, Group, Slot, flatten
from layoutbox.spacing import Insets


def _slot(width: float = 1.0, count: int = 1) -> Slot:
    return Slot(size=LayoutSize(width=w(width), height=h(1.0)), replica_count=count)


def _group(*children, direction: Direction = Direction.HORIZONTAL) -> Group:
    return Group(
        size=LayoutSize(width=w(1.0), height=absolute(100)),
        direction=direction,
        children=children,
    )


class TestDirection:
    """Tests for Direction enum."""

    @pytest.mark.unit
    def test_enum_values(self):
        """Both directions exist."""
        assert Direction.HORIZONTAL.value == "horizontal"
        assert Direction.VERTICAL.value == "vertical"


class TestSlot:
    """Tests for the leaf node."""

    @pytest.mark.unit
    def test_defaults(self):
        """A slot defaults to one replica without insets or spacing."""
        slot = _slot()
        assert slot.kind == "slot"
        assert slot.replica_count == 1
        assert slot.insets is None
        assert slot.edge_spacing is None

    @pytest.mark.unit
    def test_replica_count_must_be_positive(self):
        """replica_count below one is rejected."""
        with pytest.raises(ValidationError):
            _slot(count=0)

    @pytest.mark.unit
    def test_frozen(self):
        """Slots cannot be mutated."""
        slot = _slot()
        with pytest.raises(ValidationError):
            slot.insets = Insets.uniform(1)


class TestGroup:
    """Tests for the composite node."""

    @pytest.mark.unit
    def test_children_keep_order(self):
        """Children are stored in the given order."""
        first, second, third = _slot(0.1), _slot(0.2), _slot(0.3)
        group = _group(first, second, third)
        assert group.children == (first, second, third)

    @pytest.mark.unit
    def test_children_may_nest_groups(self):
        """Groups accept nested groups as children."""
        inner = _group(_slot(), direction=Direction.VERTICAL)
        outer = _group(_slot(), inner)
        assert outer.children[1] is inner

    @pytest.mark.unit
    def test_fragment_child_is_rejected(self):
        """A fragment can never be stored as a group child."""
        with pytest.raises(ValidationError):
            _group(Fragment(items=(_slot(),)))

    @pytest.mark.unit
    def test_default_direction_is_horizontal(self):
        """Groups default to horizontal."""
        assert _group(_slot()).direction == Direction.HORIZONTAL


class TestFlatten:
    """Tests for fragment flattening."""

    @pytest.mark.unit
    def test_real_node_flattens_to_itself(self):
        """Slots and groups flatten to a single-element list."""
        slot = _slot()
        group = _group(slot)
        assert flatten(slot) == [slot]
        assert flatten(group) == [group]

    @pytest.mark.unit
    def test_group_children_are_not_expanded(self):
        """Flatten does not descend into groups."""
        group = _group(_slot(), _slot())
        assert len(flatten(group)) == 1

    @pytest.mark.unit
    def test_nested_fragments_preserve_order(self):
        """Arbitrarily nested fragments flatten depth-first in order."""
        a, b, c, d = _slot(0.1), _slot(0.2), _slot(0.3), _slot(0.4)
        tree = Fragment(
            items=(
                a,
                Fragment(items=(Fragment(items=(b,)), c)),
                Fragment(items=()),
                d,
            )
        )
        assert flatten(tree) == [a, b, c, d]

    @pytest.mark.unit
    def test_empty_fragment_flattens_to_nothing(self):
        """An empty fragment contributes no nodes."""
        assert flatten(Fragment()) == []
        assert flatten(Fragment(items=(Fragment(), Fragment()))) == []

    @pytest.mark.unit
    def test_idempotent(self):
        """Re-wrapping a flat result and flattening again is a no-op."""
        tree = Fragment(items=(_slot(0.1), Fragment(items=(_slot(0.2), _slot(0.3)))))
        once = flatten(tree)
        assert flatten(Fragment(items=tuple(once))) == once

    @pytest.mark.unit
    def test_rejects_non_nodes(self):
        """Arbitrary objects are not flattenable."""
        with pytest.raises(TypeError, match="Cannot flatten"):
            flatten("slot")  # type: ignore[arg-type]
