"""State logic of check boxes, check-box groups, tabs, switches and foldables."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union


class GroupState(enum.Enum):
    """Aggregate state of a group of check boxes."""

    NONE = "none"
    SOME = "some"
    ALL = "all"


class _Scan(enum.Enum):
    NONE = enum.auto()
    NONE_THEN_SOME = enum.auto()
    SOME = enum.auto()
    ALL = enum.auto()


# Transitions indexed by current scan state, then by whether the box is checked.
_TRANSITIONS = {
    _Scan.NONE: (_Scan.NONE_THEN_SOME, _Scan.ALL),
    _Scan.ALL: (_Scan.SOME, _Scan.ALL),
    _Scan.SOME: (_Scan.SOME, _Scan.SOME),
    _Scan.NONE_THEN_SOME: (_Scan.NONE_THEN_SOME, _Scan.SOME),
}


def group_state(checked: Iterable[bool]) -> GroupState:
    """Return whether none, some or all of the given check boxes are checked.

    An empty group counts as having none checked.
    """
    state = _Scan.NONE
    for box in checked:
        state = _TRANSITIONS[state][1 if box else 0]
        if state is _Scan.SOME:
            break
    if state is _Scan.ALL:
        return GroupState.ALL
    if state is _Scan.SOME:
        return GroupState.SOME
    return GroupState.NONE


def toggle_group(checked: Iterable[bool]) -> list[bool]:
    """Return the new states after clicking the group's own check box.

    A group with none or some boxes checked becomes fully checked; a fully
    checked group becomes fully unchecked.
    """
    boxes = list(checked)
    new_value = group_state(boxes) in (GroupState.NONE, GroupState.SOME)
    return [new_value] * len(boxes)


def checkbox_mark(
    size: int, state: Union[GroupState, bool]
) -> Optional[tuple[int, int, int, int]]:
    """Return the (min_x, min_y, max_x, max_y) rectangle of the mark inside a box.

    A boolean state describes a single check box; True draws the same square as
    a fully checked group. Returns None when nothing is drawn.
    """
    if isinstance(state, bool):
        state = GroupState.ALL if state else GroupState.NONE
    if state is GroupState.NONE:
        return None

    padding = size // 4
    if padding == 0:
        padding = 1
    min_x = padding
    max_x = size - padding
    if state is GroupState.SOME:
        # A flattened bar signals a partially checked group.
        return min_x, min_x + padding // 2, max_x, max_x - padding // 2
    return min_x, min_x, max_x, max_x


@dataclass
class TabbedState:
    """Which tab of a tabbed view is current."""

    current: int = 0

    def clamp(self, count: int) -> int:
        """Keep the current tab within count tabs and return it."""
        if self.current >= count:
            self.current = count - 1
        return self.current

    def select(self, index: int) -> None:
        """Make the tab at index current."""
        if index < 0:
            raise IndexError("tab index out of range")
        self.current = index


def switch_min_width(
    left_width: int, right_width: int, padding: int, border_width: int
) -> int:
    """Return the width a two-sided switch needs so both halves fit the wider label."""
    label_width = max(left_width, right_width)
    return 2 * label_width + 4 * padding + border_width


def foldable_label(title: str, closed: bool) -> str:
    """Return the header text of a foldable section."""
    return ("[C] " if closed else "[O] ") + title