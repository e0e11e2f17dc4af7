"""Bottom-up composition of node trees into host engine objects.

The composer walks a flattened node tree and drives a LayoutEngine:

- A Slot becomes `replica_count` copies of one configured host item.
- A Group becomes one host group whose subitems are, in order, the items of
  its slots and the composed groups of its nested groups.

When every child of a group is a slot with the same size, insets and edge
spacing, and the engine offers a "repeat one item N times" constructor, the
composer may use it instead of an explicit list. The resulting geometry is
identical either way.

A Fragment reaching the composer, or a group without children, means the
builder invariants were broken; both raise CompositionError immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from layoutbox.config import get_default_engine_name, get_repeat_items_preference
from layoutbox.core.log import get_logger
from layoutbox.engine import LayoutEngine, get_engine
from layoutbox.node import Fragment, Group, LayoutNode, Slot

logger = get_logger("layoutbox.compose")


class CompositionError(Exception):
    """A node tree violated the composer's structural invariants."""


@dataclass(frozen=True)
class ComposerConfig:
    """Composer behaviour switches.

    Attributes:
        repeat_identical_items: Use the engine's repeat primitive for groups
            made only of identical slots. None follows the engine's
            `supports_repeated_items`; False never repeats; True repeats
            when the engine can and warns when it cannot.
    """

    repeat_identical_items: bool | None = None

    @classmethod
    def from_environment(cls) -> ComposerConfig:
        """Build a config from LAYOUTBOX_* environment variables."""
        return cls(repeat_identical_items=get_repeat_items_preference())


class Composer:
    """Lowers Slot / Group trees into host engine objects.

    Args:
        engine: Engine instance, registered engine name, or None for the
            configured default (LAYOUTBOX_ENGINE).
        config: Behaviour switches. Defaults to the environment.

    Example:
        >>> composer = Composer("model")
        >>> group = composer.compose(node)
    """

    def __init__(
        self,
        engine: LayoutEngine | str | None = None,
        config: ComposerConfig | None = None,
    ) -> None:
        if engine is None:
            engine = get_default_engine_name()
        self.engine = get_engine(engine) if isinstance(engine, str) else engine
        self.config = config if config is not None else ComposerConfig.from_environment()
        self.repeat_items = self._resolve_repeat_items()

    def _resolve_repeat_items(self) -> bool:
        requested = self.config.repeat_identical_items
        supported = self.engine.supports_repeated_items
        if requested is None:
            return supported
        if requested and not supported:
            logger.warning(
                f"Engine '{self.engine.name}' has no repeat primitive; "
                "identical items will be listed explicitly"
            )
            return False
        return requested

    def compose(self, node: LayoutNode) -> Any:
        """Compose any node.

        Returns:
            A list of host items for a Slot, one host group for a Group.

        Raises:
            CompositionError: For a Fragment or an empty Group.
        """
        match node:
            case Slot():
                return self.compose_slot(node)
            case Group():
                return self.compose_group(node)
            case Fragment():
                raise CompositionError(
                    "Fragment reached the composer; fragments must be "
                    "flattened into a group's children"
                )
        raise CompositionError(f"Cannot compose {type(node).__name__}")

    def compose_slot(self, slot: Slot) -> list[Any]:
        """Compose a slot into `replica_count` identical host items."""
        item = self.engine.make_item(slot.size)
        item = self._apply_box_config(item, slot)
        return [item] * slot.replica_count

    def compose_group(self, group: Group) -> Any:
        """Compose a group and, recursively, its children.

        Raises:
            CompositionError: If the group has no children or holds a
                fragment.
        """
        if not group.children:
            raise CompositionError(
                f"Cannot compose an empty {group.direction.value} group"
            )

        subitems: list[Any] = []
        for child in group.children:
            match child:
                case Slot():
                    subitems.extend(self.compose_slot(child))
                case Group():
                    subitems.append(self.compose_group(child))
                case _:
                    raise CompositionError(
                        f"Group child {type(child).__name__} is not a Slot or Group"
                    )

        if self.repeat_items and len(subitems) > 1 and _is_homogeneous(group.children):
            logger.debug(
                f"Repeating one item {len(subitems)} times in {group.direction.value} group"
            )
            composite = self.engine.make_repeated_group(
                group.direction, group.size, subitems[0], len(subitems)
            )
        else:
            composite = self.engine.make_group(group.direction, group.size, subitems)

        composite = self._apply_box_config(composite, group)
        if group.inter_item_spacing is not None:
            composite = self.engine.with_inter_item_spacing(
                composite, group.inter_item_spacing
            )

        logger.debug(
            f"Composed {group.direction.value} group with {len(subitems)} subitems"
        )
        return composite

    def _apply_box_config(self, obj: Any, node: Slot | Group) -> Any:
        if node.insets is not None:
            obj = self.engine.with_content_insets(obj, node.insets)
        if node.edge_spacing is not None:
            obj = self.engine.with_edge_spacing(obj, node.edge_spacing)
        return obj


def _is_homogeneous(children: tuple[Slot | Group, ...]) -> bool:
    """True when every child is a slot with one shared configuration."""
    signatures = set()
    for child in children:
        if not isinstance(child, Slot):
            return False
        signatures.add((child.size, child.insets, child.edge_spacing))
    return len(signatures) == 1


def compose(
    node: LayoutNode,
    engine: LayoutEngine | str | None = None,
    config: ComposerConfig | None = None,
) -> Any:
    """Compose a node with a one-off Composer."""
    return Composer(engine, config).compose(node)


__all__ = [
    "CompositionError",
    "ComposerConfig",
    "Composer",
    "compose",
]
