"""Unit tests for the engine module.

Tests for:
- LayoutEngine abstract base class
- Engine registry (register_engine, get_engine, list_engines)
"""

import pytest

from layoutbox.dimension import LayoutSize, h, w
from layoutbox.engine import LayoutEngine, get_engine, list_engines
from layoutbox.node import Direction


class _MinimalEngine(LayoutEngine):
    """Engine implementing only the abstract surface."""

    @property
    def name(self) -> str:
        return "minimal"

    def make_item(self, size):
        return ("item", size)

    def make_group(self, direction, size, subitems):
        return ("group", direction, size, tuple(subitems))

    def with_content_insets(self, obj, insets):
        return obj

    def with_edge_spacing(self, obj, edges):
        return obj

    def with_inter_item_spacing(self, group, spacing):
        return group

    def make_section(self, group, insets=None, inter_group_spacing=None):
        return ("section", group)

    def make_layout(self, sections):
        return ("layout", tuple(sections))


class TestLayoutEngineContract:
    """Tests for LayoutEngine abstract base class contract."""

    @pytest.mark.unit
    def test_layout_engine_is_abstract(self):
        """LayoutEngine cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            LayoutEngine()  # type: ignore

    @pytest.mark.unit
    def test_concrete_engine_requires_make_item(self):
        """Concrete engines must implement make_item."""

        class IncompleteEngine(LayoutEngine):
            @property
            def name(self) -> str:
                return "incomplete"

        with pytest.raises(TypeError, match="abstract"):
            IncompleteEngine()

    @pytest.mark.unit
    def test_repeat_support_defaults_off(self):
        """Engines do not advertise the repeat primitive unless they opt in."""
        assert _MinimalEngine().supports_repeated_items is False

    @pytest.mark.unit
    def test_default_repeated_group_raises(self):
        """The default repeat constructor refuses to run."""
        engine = _MinimalEngine()
        size = LayoutSize(width=w(1.0), height=h(1.0))
        with pytest.raises(NotImplementedError, match="minimal"):
            engine.make_repeated_group(Direction.HORIZONTAL, size, engine.make_item(size), 2)


class TestEngineRegistry:
    """Tests for engine registry functions."""

    @pytest.mark.unit
    def test_list_engines_includes_bundled(self):
        """Both bundled engines are listed."""
        engines = list_engines()
        assert "model" in engines
        assert "descriptor" in engines

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["model", "descriptor"])
    def test_get_engine(self, name):
        """get_engine returns an instance with the requested name."""
        engine = get_engine(name)
        assert engine.name == name
        assert isinstance(engine, LayoutEngine)

    @pytest.mark.unit
    def test_get_engine_unknown_raises_key_error(self):
        """get_engine raises KeyError listing available engines."""
        with pytest.raises(KeyError, match="Unknown engine") as exc_info:
            get_engine("nonexistent_engine")
        assert "model" in str(exc_info.value)

    @pytest.mark.unit
    def test_get_engine_returns_new_instance_each_time(self):
        """get_engine returns a new instance on each call."""
        first = get_engine("model")
        second = get_engine("model")
        assert first is not second
        assert type(first) is type(second)

    @pytest.mark.unit
    def test_register_engine_adds_to_registry(self):
        """register_engine makes a class available by name."""
        from layoutbox.engine.lib import _registry, register_engine

        @register_engine
        class TempEngine(_MinimalEngine):
            @property
            def name(self) -> str:
                return "temp_test_engine"

        try:
            assert _registry["temp_test_engine"] is TempEngine
            assert get_engine("temp_test_engine").name == "temp_test_engine"
        finally:
            _registry.pop("temp_test_engine", None)

    @pytest.mark.unit
    def test_custom_engine_drives_composer(self):
        """A third-party engine works with the composer unchanged."""
        from layoutbox.builder import GroupBox, ItemBox

        result = GroupBox(
            w(1.0), h(1.0), lambda: ItemBox(w(0.5), h(1.0), columns=2)
        ).compose(_MinimalEngine())
        kind, direction, _, subitems = result
        assert kind == "group"
        assert direction == Direction.HORIZONTAL
        assert len(subitems) == 2
