import pytest

from traceui.controls import (
    GroupState,
    TabbedState,
    checkbox_mark,
    foldable_label,
    group_state,
    switch_min_width,
    toggle_group,
)


@pytest.mark.parametrize(
    "checked, expected",
    [
        ([], GroupState.NONE),
        ([False], GroupState.NONE),
        ([False, False, False], GroupState.NONE),
        ([True], GroupState.ALL),
        ([True, True, True], GroupState.ALL),
        ([True, False], GroupState.SOME),
        ([False, True], GroupState.SOME),
        ([False, False, True, False], GroupState.SOME),
        ([True, True, False], GroupState.SOME),
    ],
)
def test_group_state(checked, expected):
    assert group_state(checked) is expected


def test_group_state_accepts_generator():
    assert group_state(x > 1 for x in range(4)) is GroupState.SOME


def test_toggle_group_none_checks_all():
    assert toggle_group([False, False]) == [True, True]


def test_toggle_group_some_checks_all():
    assert toggle_group([True, False, False]) == [True, True, True]


def test_toggle_group_all_unchecks_all():
    assert toggle_group([True, True]) == [False, False]


def test_toggle_group_empty():
    assert toggle_group([]) == []


def test_toggle_twice_from_all_returns_to_all():
    once = toggle_group([True, True, True])
    assert toggle_group(once) == [True, True, True]


def test_checkbox_mark_none():
    assert checkbox_mark(16, GroupState.NONE) is None
    assert checkbox_mark(16, False) is None


def test_checkbox_mark_all_is_centered_square():
    min_x, min_y, max_x, max_y = checkbox_mark(20, GroupState.ALL)
    assert min_x == min_y
    assert max_x == max_y
    assert min_x == 20 - max_x


def test_checkbox_mark_bool_matches_all():
    assert checkbox_mark(24, True) == checkbox_mark(24, GroupState.ALL)


def test_checkbox_mark_some_is_flatter_than_all():
    some = checkbox_mark(16, GroupState.SOME)
    full = checkbox_mark(16, GroupState.ALL)
    assert some[0] == full[0] and some[2] == full[2]
    assert some[1] > full[1]
    assert some[3] < full[3]


def test_checkbox_mark_small_box_uses_minimum_padding():
    assert checkbox_mark(3, GroupState.ALL) == (1, 1, 2, 2)


def test_tabbed_clamp_limits_current():
    state = TabbedState(current=7)
    assert state.clamp(3) == 2
    assert state.current == 2


def test_tabbed_clamp_keeps_valid_current():
    state = TabbedState(current=1)
    assert state.clamp(3) == 1


def test_tabbed_select():
    state = TabbedState()
    state.select(2)
    assert state.current == 2


def test_tabbed_select_negative_raises():
    with pytest.raises(IndexError):
        TabbedState().select(-1)


def test_switch_min_width_symmetric():
    assert switch_min_width(10, 6, 5, 1) == switch_min_width(6, 10, 5, 1)


def test_switch_min_width_uses_wider_label():
    assert switch_min_width(10, 6, 5, 1) == switch_min_width(10, 10, 5, 1)
    assert switch_min_width(11, 6, 5, 1) > switch_min_width(10, 6, 5, 1)


def test_switch_min_width_value():
    assert switch_min_width(10, 6, 5, 1) == 41


@pytest.mark.parametrize(
    "closed, expected",
    [(True, "[C] Details"), (False, "[O] Details")],
)
def test_foldable_label(closed, expected):
    assert foldable_label("Details", closed) == expected