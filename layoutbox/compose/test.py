"""Unit tests for the composer."""

import logging

import pytest

from layoutbox.builder import GroupBox, ItemBox
from layoutbox.compose import Composer, ComposerConfig, CompositionError, compose
from layoutbox.dimension import LayoutSize, absolute, h, w
from layoutbox.engine.model import Item, ItemGroup
from layoutbox.node import Direction, Fragment, Group, Slot
from layoutbox.spacing import EdgeSpacing, Insets, fixed

NO_REPEAT = ComposerConfig(repeat_identical_items=False)
REPEAT = ComposerConfig(repeat_identical_items=True)


def _slot(width: float = 0.5, count: int = 1, **kwargs) -> Slot:
    return Slot(
        size=LayoutSize(width=w(width), height=h(1.0)), replica_count=count, **kwargs
    )


def _group(*children, direction: Direction = Direction.HORIZONTAL, **kwargs) -> Group:
    return Group(
        size=LayoutSize(width=w(1.0), height=absolute(100)),
        direction=direction,
        children=children,
        **kwargs,
    )


class TestScenarios:
    """End-to-end composition of small layouts."""

    @pytest.mark.unit
    @pytest.mark.parametrize("config", [NO_REPEAT, REPEAT])
    def test_replicated_slot(self, model_engine, config):
        """One slot with two replicas composes to two identical items."""
        box = GroupBox.horizontal(
            w(1.0), h(1.0), lambda: ItemBox(w(0.5), h(1.0), columns=2)
        )
        result = box.compose(model_engine, config)

        assert isinstance(result, ItemGroup)
        subitems = result.effective_subitems
        assert len(subitems) == 2
        for item in subitems:
            assert item.layout_size.width == w(0.5)
            assert item.layout_size.height == h(1.0)

    @pytest.mark.unit
    def test_slot_then_nested_group(self, model_engine):
        """A slot followed by a nested group gives one item and one group."""

        def column():
            yield ItemBox(w(1.0), h(0.5)).insets(space=3)

        def row():
            yield ItemBox(w(0.3), h(1.0))
            yield GroupBox.vertical(w(0.7), h(1.0), column)

        result = GroupBox.horizontal(w(1.0), h(1.0), row).compose(model_engine)

        assert len(result.subitems) == 2
        leaf, nested = result.subitems
        assert isinstance(leaf, Item)
        assert isinstance(nested, ItemGroup)
        assert nested.direction == Direction.VERTICAL
        (inner,) = nested.effective_subitems
        assert inner.layout_size == LayoutSize(width=w(1.0), height=h(0.5))
        assert inner.content_insets == Insets.uniform(3)

    @pytest.mark.unit
    def test_loop_preserves_order(self, model_engine):
        """Ten loop iterations compose to ten items in ascending order."""

        def block():
            for i in range(10):
                yield ItemBox(w(0.1), h(1.0)).insets(space=i * 0.5)

        result = GroupBox.horizontal(w(1.0), h(1.0), block).compose(model_engine)

        assert len(result.effective_subitems) == 10
        spacings = [item.content_insets.top for item in result.effective_subitems]
        assert spacings == [i * 0.5 for i in range(10)]

    @pytest.mark.unit
    def test_nested_fixture(self, nested_layout, model_engine):
        """The nested sample layout has two items and one group at the top."""
        result = nested_layout.compose(model_engine, NO_REPEAT)
        kinds = [sub.kind for sub in result.subitems]
        assert kinds == ["item", "item", "group"]
        assert result.content_insets == Insets.uniform(10)
        assert len(result.subitems[2].subitems) == 2

    @pytest.mark.unit
    def test_table_fixture(self, table_layout, model_engine):
        """The table sample layout keeps its three rows and nested columns."""
        result = table_layout.compose(model_engine, NO_REPEAT)
        assert result.direction == Direction.VERTICAL
        assert len(result.subitems) == 3
        first_row, second_row, third_row = result.subitems
        assert [g.direction for g in first_row.subitems] == [
            Direction.VERTICAL,
            Direction.VERTICAL,
        ]
        assert len(second_row.subitems) == 2
        assert len(third_row.subitems[1].subitems) == 3


class TestComposer:
    """Tests for Composer behaviour."""

    @pytest.mark.unit
    def test_slot_fans_out_replicas(self, model_engine):
        """compose_slot yields replica_count equal items."""
        items = Composer(model_engine).compose_slot(_slot(count=4))
        assert len(items) == 4
        assert all(item == items[0] for item in items)

    @pytest.mark.unit
    def test_group_subitem_count(self, model_engine):
        """Subitem count is the sum of replicas plus nested groups."""
        group = _group(_slot(count=2), _slot(0.2, count=3), _group(_slot()))
        result = Composer(model_engine, NO_REPEAT).compose_group(group)
        assert len(result.subitems) == 2 + 3 + 1

    @pytest.mark.unit
    def test_box_configuration_applied(self, model_engine):
        """Insets, edge spacing and inter-item spacing reach the host objects."""
        edges = EdgeSpacing(leading=fixed(4))
        group = _group(
            _slot(insets=Insets.uniform(2), edge_spacing=edges),
            insets=Insets(top=1),
            inter_item_spacing=fixed(6),
        )
        result = Composer(model_engine).compose_group(group)
        assert result.content_insets == Insets(top=1)
        assert result.inter_item_spacing == fixed(6)
        assert result.edge_spacing is None
        (item,) = result.effective_subitems
        assert item.content_insets == Insets.uniform(2)
        assert item.edge_spacing == edges

    @pytest.mark.unit
    def test_empty_group_raises(self, model_engine):
        """A group without children cannot be composed."""
        with pytest.raises(CompositionError, match="empty"):
            Composer(model_engine).compose_group(_group())

    @pytest.mark.unit
    def test_nested_empty_group_raises(self, model_engine):
        """Empty groups are rejected at any depth."""
        with pytest.raises(CompositionError):
            Composer(model_engine).compose(_group(_slot(), _group()))

    @pytest.mark.unit
    def test_fragment_raises(self, model_engine):
        """Fragments never reach the host engine."""
        with pytest.raises(CompositionError, match="Fragment"):
            Composer(model_engine).compose(Fragment(items=(_slot(),)))

    @pytest.mark.unit
    def test_unknown_node_raises(self, model_engine):
        """Arbitrary objects are rejected."""
        with pytest.raises(CompositionError, match="Cannot compose"):
            Composer(model_engine).compose("slot")  # type: ignore[arg-type]

    @pytest.mark.unit
    def test_deterministic(self, nested_layout, model_engine, descriptor_engine):
        """Composing the same tree twice gives equal results."""
        node = nested_layout.build()
        for engine in (model_engine, descriptor_engine):
            composer = Composer(engine)
            assert composer.compose(node) == composer.compose(node)

    @pytest.mark.unit
    def test_module_compose_uses_engine_name(self):
        """compose() accepts an engine name."""
        result = compose(_group(_slot()), "descriptor")
        assert result["type"] == "group"

    @pytest.mark.unit
    def test_default_engine_from_environment(self, monkeypatch):
        """The default engine follows LAYOUTBOX_ENGINE."""
        monkeypatch.setenv("LAYOUTBOX_ENGINE", "descriptor")
        assert Composer().engine.name == "descriptor"

    @pytest.mark.unit
    def test_unknown_engine_name(self):
        """Unknown engine names surface the registry error."""
        with pytest.raises(KeyError, match="Unknown engine"):
            Composer("nope")


class TestRepeatedItems:
    """Tests for the identical-slot repeat optimisation."""

    @pytest.mark.unit
    def test_uses_repeat_primitive(self, model_engine):
        """Identical slots are built with the engine's repeat constructor."""
        result = Composer(model_engine, REPEAT).compose_group(
            _group(_slot(count=2), _slot(count=3))
        )
        assert result.repeat_count == 5
        assert len(result.subitems) == 1

    @pytest.mark.unit
    def test_disabled_lists_explicitly(self, model_engine):
        """With the flag off every subitem is listed."""
        result = Composer(model_engine, NO_REPEAT).compose_group(
            _group(_slot(count=2), _slot(count=3))
        )
        assert result.repeat_count is None
        assert len(result.subitems) == 5

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "children",
        [
            (_slot(0.5), _slot(0.4)),
            (_slot(insets=Insets.uniform(1)), _slot()),
            (_slot(), _group(_slot())),
        ],
    )
    def test_mixed_children_never_repeat(self, model_engine, children):
        """Differing slots or nested groups fall back to an explicit list."""
        result = Composer(model_engine, REPEAT).compose_group(_group(*children))
        assert result.repeat_count is None

    @pytest.mark.unit
    def test_single_item_never_repeats(self, model_engine):
        """One subitem is always listed explicitly."""
        result = Composer(model_engine, REPEAT).compose_group(_group(_slot()))
        assert result.repeat_count is None

    @pytest.mark.unit
    def test_geometry_is_equivalent(self, model_engine, descriptor_engine):
        """Repeated and explicit forms describe the same subitems."""
        group = _group(_slot(count=3, insets=Insets.uniform(2)), inter_item_spacing=fixed(1))
        repeated = Composer(model_engine, REPEAT).compose_group(group)
        explicit = Composer(model_engine, NO_REPEAT).compose_group(group)
        described = Composer(descriptor_engine).compose_group(group)

        assert repeated.repeat_count == 3
        assert repeated.effective_subitems == explicit.effective_subitems
        assert repeated.inter_item_spacing == explicit.inter_item_spacing
        assert len(described["subitems"]) == 3

    @pytest.mark.unit
    def test_default_follows_engine(self, model_engine, descriptor_engine):
        """Unset preference follows the engine's capability."""
        assert Composer(model_engine, ComposerConfig()).repeat_items is True
        assert Composer(descriptor_engine, ComposerConfig()).repeat_items is False

    @pytest.mark.unit
    def test_requested_but_unsupported_warns(self, descriptor_engine, caplog):
        """Requesting repeats from an engine without them logs a warning."""
        with caplog.at_level(logging.WARNING, logger="layoutbox.compose"):
            composer = Composer(descriptor_engine, REPEAT)
        assert composer.repeat_items is False
        assert "no repeat primitive" in caplog.text

        result = composer.compose_group(_group(_slot(count=3)))
        assert len(result["subitems"]) == 3

    @pytest.mark.unit
    def test_config_from_environment(self, monkeypatch):
        """LAYOUTBOX_REPEAT_ITEMS feeds ComposerConfig.from_environment."""
        assert ComposerConfig.from_environment().repeat_identical_items is None
        monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", "false")
        assert ComposerConfig.from_environment().repeat_identical_items is False
        monkeypatch.setenv("LAYOUTBOX_REPEAT_ITEMS", "1")
        assert ComposerConfig.from_environment().repeat_identical_items is True
