"""Unit tests for section and layout assembly."""

import pytest

from layoutbox.compose import ComposerConfig, CompositionError
from layoutbox.dimension import h, w
from layoutbox.builder import GroupBox, ItemBox
from layoutbox.engine.model import CompositionalLayout, Section
from layoutbox.section import make_layout, make_section
from layoutbox.spacing import Insets


def _row(count: int = 2) -> GroupBox:
    return GroupBox.horizontal(
        w(1.0), h(0.2), lambda: ItemBox(w(1 / count), h(1.0), columns=count)
    )


class TestMakeSection:
    """Tests for make_section."""

    @pytest.mark.unit
    def test_wraps_composed_group(self, model_engine):
        """The section holds the composed top-level group."""
        section = make_section(_row(), model_engine, insets=Insets.uniform(6))
        assert isinstance(section, Section)
        assert len(section.group.effective_subitems) == 2
        assert section.content_insets == Insets.uniform(6)

    @pytest.mark.unit
    def test_accepts_built_group(self, model_engine):
        """A frozen Group works as well as a GroupBox."""
        section = make_section(_row(3).build(), model_engine, inter_group_spacing=4)
        assert len(section.group.effective_subitems) == 3
        assert section.inter_group_spacing == 4

    @pytest.mark.unit
    def test_respects_config(self, model_engine):
        """Composer configuration is forwarded."""
        config = ComposerConfig(repeat_identical_items=False)
        section = make_section(_row(3), model_engine, config)
        assert section.group.repeat_count is None
        assert len(section.group.subitems) == 3

    @pytest.mark.unit
    def test_empty_group_raises(self, model_engine):
        """Empty top-level groups fail like any other."""
        with pytest.raises(CompositionError):
            make_section(GroupBox(w(1.0), h(1.0), lambda: None), model_engine)


class TestMakeLayout:
    """Tests for make_layout."""

    @pytest.mark.unit
    def test_mixes_sections_and_groups(self, model_engine):
        """Groups are wrapped in default sections, in the given order."""
        first = make_section(_row(2), model_engine, insets=Insets.uniform(1))
        layout = make_layout(first, _row(4), engine=model_engine)

        assert isinstance(layout, CompositionalLayout)
        assert len(layout.sections) == 2
        assert layout.sections[0] is first
        assert layout.sections[1].content_insets == Insets()
        assert len(layout.sections[1].group.effective_subitems) == 4

    @pytest.mark.unit
    def test_descriptor_layout(self, table_layout):
        """The descriptor engine produces a layout dict."""
        layout = make_layout(table_layout, engine="descriptor")
        assert layout["type"] == "layout"
        (section,) = layout["sections"]
        assert section["group"]["direction"] == "vertical"
        assert len(section["group"]["subitems"]) == 3

    @pytest.mark.unit
    def test_requires_a_section(self):
        """A layout without sections is rejected."""
        with pytest.raises(ValueError, match="at least one section"):
            make_layout(engine="model")
