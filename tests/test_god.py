import pytest

from formengine.god import GodView
from formengine.players import PlayerManager
from formengine.worldview import WorldView


@pytest.fixture
def setup():
    view = WorldView(10, 20)
    manager = PlayerManager()
    god = GodView(view, manager, 3, 4, 5, 5)
    return view, manager, god


def test_registered_as_player_minus_one(setup):
    _, manager, god = setup
    assert manager.check(-1) is god.player
    assert god.player.character is god


def test_zoom_limits(setup):
    _, _, god = setup
    assert god.max_zoom == 60
    assert god.min_zoom == 2


def test_controls_ignored_when_off(setup):
    _, manager, god = setup
    manager.process([("K0^", 1.0), ("K0<", 1.0)], False)
    assert god.move == [0, 0]


def test_controls_through_manager(setup):
    _, manager, god = setup
    god.turn_on()
    manager.process([("K0^", 1.0)], False)
    assert god.move == [0, 1]
    manager.process([("K0>", 1.0)], False)
    assert god.move == [1, 1]
    manager.process([("K0^", 0.0)], False)
    assert god.move == [1, 0]


def test_release_keeps_opposite_direction(setup):
    _, _, god = setup
    god.turn_on()
    god.cam_up(1.0)
    god.cam_down(0.0)
    assert god.move[1] == 1
    god.cam_left(1.0)
    god.cam_right(0.0)
    assert god.move[0] == -1


def test_zoom_flags(setup):
    _, manager, god = setup
    god.turn_on()
    manager.process([("K0-", 1.0), ("K0=", 1.0)], False)
    assert god.zoom == [True, True]
    god.zoom_out(0.0)
    assert god.zoom == [False, True]
    god.turn_off()
    god.zoom_in(0.0)
    assert god.zoom == [False, True]


def test_place_truncates(setup):
    _, _, god = setup
    god.place(2.7, 3.2, 6, 7)
    assert god.pos == [2, 3]
    assert god.frame == [6, 7]


def test_apply_frame_updates_view_once(setup):
    view, _, god = setup
    god.place(2, 3, 6, 6)
    assert god.apply_frame() is True
    assert view.center_x == 2 * view.scale_power
    assert view.center_y == 3 * view.scale_power
    assert view.frame == 6
    assert god.apply_frame() is False


def test_turn_on_applies_frame(setup):
    view, _, god = setup
    god.turn_on()
    assert god.on is True
    assert view.frame == god.frame[0]
    god.turn_off()
    assert god.on is False