"""Root pytest configuration and fixtures.

This module provides:
- Environment isolation (LAYOUTBOX_* variables cleared per test)
- Engine fixtures
- Sample layouts shared across test modules
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from layoutbox.builder import GroupBox
    from layoutbox.engine.descriptor import DescriptorEngine
    from layoutbox.engine.model import ModelEngine


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer LAYOUTBOX_* settings out of the tests."""
    for name in ("LAYOUTBOX_ENGINE", "LAYOUTBOX_REPEAT_ITEMS", "LAYOUTBOX_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def model_engine() -> ModelEngine:
    """Reference engine producing pydantic host objects."""
    from layoutbox.engine.model import ModelEngine

    return ModelEngine()


@pytest.fixture
def descriptor_engine() -> DescriptorEngine:
    """Engine producing JSON-compatible dicts (no repeat primitive)."""
    from layoutbox.engine.descriptor import DescriptorEngine

    return DescriptorEngine()


# =============================================================================
# Common Layout Fixtures
# =============================================================================


@pytest.fixture
def nested_layout() -> GroupBox:
    """A row holding two 0.3-wide items and a vertical column of two items.

    Returns:
        GroupBox with 3 top-level children after composition
        (2 items + 1 nested group).
    """
    from layoutbox.builder import GroupBox, ItemBox
    from layoutbox.dimension import h, w
    from layoutbox.node import Direction

    def column():
        yield ItemBox(w(1.0), h(0.3), columns=2).insets(space=10)

    def row():
        yield ItemBox(w(0.3), h(1.0), columns=2).insets(space=10)
        yield GroupBox(w(0.4), h(1.0), column, direction=Direction.VERTICAL)

    return GroupBox(w(1.0), h(0.4), row).insets(space=10)


@pytest.fixture
def table_layout() -> GroupBox:
    """A three-row table mixing nested vertical and horizontal groups."""
    from layoutbox.builder import GroupBox, ItemBox
    from layoutbox.dimension import h, w

    def cell(width: float, height: float, columns: int = 1) -> ItemBox:
        return ItemBox(w(width), h(height), columns=columns).insets(space=2)

    def table():
        yield GroupBox.horizontal(
            w(1.0),
            h(0.4),
            lambda: [
                GroupBox.vertical(
                    w(2 / 3), h(1.0), lambda: [cell(1.0, 2 / 3), cell(1.0, 1 / 3)]
                ),
                GroupBox.vertical(
                    w(1 / 3), h(1.0), lambda: [cell(1.0, 1 / 3), cell(1.0, 2 / 3)]
                ),
            ],
        )
        yield GroupBox.horizontal(
            w(1.0), h(1 / 7), lambda: [cell(1 / 3, 1.0), cell(2 / 3, 1.0)]
        )
        yield GroupBox.horizontal(
            w(1.0),
            h(3 / 7),
            lambda: [
                cell(2 / 3, 1.0),
                GroupBox.vertical(w(1 / 3), h(1.0), lambda: cell(1.0, 1 / 3, columns=3)),
            ],
        )

    return GroupBox.vertical(w(1.0), h(1.0), table).insets(space=5)
