"""Unit tests for the descriptor engine."""

import json

import pytest

from layoutbox.dimension import LayoutSize, absolute, estimated, h, w
from layoutbox.engine.descriptor import DescriptorEngine, to_json
from layoutbox.node import Direction
from layoutbox.spacing import EdgeSpacing, Insets, fixed, flexible


@pytest.fixture
def engine():
    """Create a DescriptorEngine instance."""
    return DescriptorEngine()


class TestDescriptorEngine:
    """Tests for DescriptorEngine."""

    @pytest.mark.unit
    def test_engine_name(self, engine):
        """Engine has correct name and no repeat primitive."""
        assert engine.name == "descriptor"
        assert engine.supports_repeated_items is False

    @pytest.mark.unit
    def test_make_item(self, engine):
        """Items describe their layout size with camelCase kinds."""
        item = engine.make_item(LayoutSize(width=w(0.5), height=estimated(44)))
        assert item == {
            "type": "item",
            "layoutSize": {
                "widthDimension": {"kind": "fractionalWidth", "value": 0.5},
                "heightDimension": {"kind": "estimated", "value": 44.0},
            },
        }

    @pytest.mark.unit
    def test_make_group(self, engine):
        """Groups record direction and ordered subitems."""
        size = LayoutSize(width=absolute(110), height=h(1.0))
        a = engine.make_item(size)
        group = engine.make_group(Direction.VERTICAL, size, [a, a])
        assert group["type"] == "group"
        assert group["direction"] == "vertical"
        assert group["layoutSize"]["heightDimension"]["kind"] == "fractionalHeight"
        assert group["subitems"] == [a, a]

    @pytest.mark.unit
    def test_configuration_keys(self, engine):
        """with_* calls add keys without touching the input."""
        size = LayoutSize(width=w(1.0), height=h(1.0))
        item = engine.make_item(size)
        inset = engine.with_content_insets(item, Insets(top=1, trailing=2))
        edged = engine.with_edge_spacing(inset, EdgeSpacing(leading=flexible(3)))

        assert "contentInsets" not in item
        assert inset["contentInsets"] == {
            "top": 1.0,
            "leading": 0.0,
            "bottom": 0.0,
            "trailing": 2.0,
        }
        assert edged["edgeSpacing"] == {
            "leading": {"kind": "flexible", "value": 3.0},
            "top": None,
            "trailing": None,
            "bottom": None,
        }

        group = engine.make_group(Direction.HORIZONTAL, size, [edged])
        spaced = engine.with_inter_item_spacing(group, fixed(5))
        assert spaced["interItemSpacing"] == {"kind": "fixed", "value": 5.0}

    @pytest.mark.unit
    def test_repeated_group_unsupported(self, engine):
        """The descriptor engine cannot repeat items."""
        size = LayoutSize(width=w(1.0), height=h(1.0))
        with pytest.raises(NotImplementedError):
            engine.make_repeated_group(Direction.HORIZONTAL, size, engine.make_item(size), 2)

    @pytest.mark.unit
    def test_section_and_layout(self, engine):
        """Optional section keys appear only when given."""
        size = LayoutSize(width=w(1.0), height=h(1.0))
        group = engine.make_group(Direction.HORIZONTAL, size, [engine.make_item(size)])

        plain = engine.make_section(group)
        assert set(plain) == {"type", "group"}

        spaced = engine.make_section(group, Insets.uniform(4), inter_group_spacing=10)
        assert spaced["contentInsets"]["top"] == 4.0
        assert spaced["interGroupSpacing"] == 10

        layout = engine.make_layout([plain, spaced])
        assert layout == {"type": "layout", "sections": [plain, spaced]}


class TestToJson:
    """Tests for descriptor serialization."""

    @pytest.mark.unit
    def test_composed_layout_is_json(self, nested_layout):
        """A composed layout serializes and parses back to the same dict."""
        descriptor = nested_layout.compose("descriptor")
        text = to_json(descriptor)
        assert json.loads(text) == descriptor
        assert '"subitems"' in text

    @pytest.mark.unit
    def test_compact_output(self, engine):
        """indent=None produces single-line output."""
        item = engine.make_item(LayoutSize(width=w(1.0), height=h(1.0)))
        assert "\n" not in to_json(item, indent=None)
