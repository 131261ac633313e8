import pygame
from input_handler import handle_events
from state import GameState
from territory import Territory


def _state():
    return GameState(territories=(
        Territory("West", ((0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)), owner=0, armies=2),
        Territory("East", ((200.0, 0.0), (300.0, 0.0), (300.0, 100.0), (200.0, 100.0)), owner=1, armies=4),
    ))


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def test_left_click_selects():
    state = _state()
    assert handle_events(state, [_click((250, 50))]) is True
    assert state.selected_index == 1


def test_right_click_is_ignored():
    state = _state()
    state.handle_click((50, 50))
    handle_events(state, [_click((250, 50), button=3)])
    assert state.selected_index == 0


def test_no_events_is_noop():
    state = _state()
    state.handle_click((50, 50))
    assert handle_events(state, []) is True
    assert state.selected_index == 0


def test_several_clicks_in_one_frame_apply_in_order():
    state = _state()
    handle_events(state, [_click((50, 50)), _click((250, 50)), _click((150, 50))])
    assert state.selected_index is None


def test_quit_stops_loop():
    state = _state()
    assert handle_events(state, [pygame.event.Event(pygame.QUIT)]) is False


def test_mouse_motion_does_not_select():
    state = _state()
    handle_events(state, [pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 50), rel=(0, 0), buttons=(0, 0, 0))])
    assert state.selected_index is None
