from formengine.players import InputMapping, Player, PlayerManager


def _recorder():
    calls = []

    def handler(character, value):
        calls.append((character, value))

    return calls, handler


def test_add_control_stores_mapping():
    player = Player("hero", 0)
    calls, handler = _recorder()
    mapping = player.add_control("K0^", handler)
    assert player.controls == [InputMapping("K0^", handler)]
    assert mapping.input == "K0^"


def test_process_dispatches_to_matching_control():
    manager = PlayerManager()
    player = Player("hero", 0)
    calls, handler = _recorder()
    player.add_control("K0<", handler)
    manager.add(player)
    assert manager.process([("K0<", 1.0), ("K0>", 1.0)], paused=False) == 1
    assert calls == [("hero", 1.0)]


def test_only_first_matching_control_runs():
    manager = PlayerManager()
    player = Player("hero", 0)
    first, h1 = _recorder()
    second, h2 = _recorder()
    player.add_control("A", h1)
    player.add_control("A", h2)
    manager.add(player)
    assert manager.process([("A", 0.5)], paused=False) == 1
    assert first == [("hero", 0.5)]
    assert second == []


def test_every_player_receives_input():
    manager = PlayerManager()
    calls, handler = _recorder()
    for num in range(3):
        p = Player(num, num)
        p.add_control("X", handler)
        manager.add(p)
    assert manager.process([("X", 0.0)], paused=False) == 3
    assert [c for c, _ in calls] == [0, 1, 2]


def test_inactive_player_skipped():
    manager = PlayerManager()
    player = Player("hero", 0, active=False)
    calls, handler = _recorder()
    player.add_control("X", handler)
    manager.add(player)
    assert manager.process([("X", 1.0)], paused=False) == 0
    assert calls == []


def test_paused_skips_pause_players():
    manager = PlayerManager()
    calls, handler = _recorder()
    held = Player("held", 0, pause_player=True)
    free = Player("free", 1)
    held.add_control("X", handler)
    free.add_control("X", handler)
    manager.add(held)
    manager.add(free)
    assert manager.process([("X", 1.0)], paused=True) == 1
    assert calls == [("free", 1.0)]
    assert manager.process([("X", 2.0)], paused=False) == 2
    assert calls[1:] == [("held", 2.0), ("free", 2.0)]


def test_add_duplicate_number_returns_existing():
    manager = PlayerManager()
    first = Player("a", 4)
    assert manager.add(first) is None
    assert manager.add(Player("b", 4)) is first
    assert len(manager) == 1
    assert manager.check(4) is first
    assert manager.check(5) is None


def test_remove():
    manager = PlayerManager()
    player = Player("a", 1)
    manager.add(player)
    manager.remove(player)
    assert manager.check(1) is None
    assert len(manager) == 0


def test_release_all_calls_delete_functions():
    released = []
    manager = PlayerManager()
    manager.add(Player("a", 1, released.append))
    manager.add(Player("b", 2))
    manager.release_all()
    assert released == ["a"]
    assert len(manager) == 0


def test_release_drops_controls():
    player = Player("a", 1)
    _, handler = _recorder()
    player.add_control("X", handler)
    player.release()
    assert player.controls == []
    assert player.handle("X", 1.0) is False