"""Section and layout assembly.

Thin glue around the composer: a section wraps one composed top-level group,
a layout wraps one or more sections.
"""

from collections.abc import Sequence
from typing import Any

from layoutbox.builder import GroupBox
from layoutbox.compose import Composer, ComposerConfig
from layoutbox.engine import LayoutEngine
from layoutbox.node import Group
from layoutbox.spacing import Insets


def make_section(
    group: GroupBox | Group,
    engine: LayoutEngine | str | None = None,
    config: ComposerConfig | None = None,
    *,
    insets: Insets | None = None,
    inter_group_spacing: float | None = None,
) -> Any:
    """Compose a top-level group and wrap it in the engine's section.

    Args:
        group: Group builder or built Group node.
        engine: Engine instance or name; None uses the configured default.
        config: Composer configuration.
        insets: Section content insets.
        inter_group_spacing: Spacing between repetitions of the group.

    Returns:
        The engine's section object.
    """
    composer = Composer(engine, config)
    node = group.build() if isinstance(group, GroupBox) else group
    return composer.engine.make_section(
        composer.compose_group(node),
        insets=insets,
        inter_group_spacing=inter_group_spacing,
    )


def make_layout(
    *sections: Any,
    engine: LayoutEngine | str | None = None,
    config: ComposerConfig | None = None,
) -> Any:
    """Wrap sections in the engine's top-level layout object.

    Sections may be engine section objects (from `make_section`) or groups,
    which are turned into default sections first. All must target the
    same engine.

    Raises:
        ValueError: If no sections are given.
    """
    if not sections:
        raise ValueError("A layout needs at least one section")

    composer = Composer(engine, config)
    resolved: list[Any] = []
    for section in sections:
        if isinstance(section, (GroupBox, Group)):
            section = make_section(section, composer.engine, composer.config)
        resolved.append(section)
    return composer.engine.make_layout(resolved)


__all__ = ["make_section", "make_layout"]
