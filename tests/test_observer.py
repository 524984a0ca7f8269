import random

from minigames.components.game_state import SceneId
from minigames.events.bus import EventBus
from minigames.events.observer import GameObserver, connect_observer
from minigames.systems.mine_grid_system import MineGridSystem
from minigames.world import create_world


class _Recorder:
    def __init__(self):
        self.changes = []
        self.game_overs = []
        self.wins = []

    def on_state_changed(self, scene, reason):
        self.changes.append((scene, reason))

    def on_game_over(self, scene):
        self.game_overs.append(scene)

    def on_win(self, scene):
        self.wins.append(scene)


def test_recorder_satisfies_protocol():
    assert isinstance(_Recorder(), GameObserver)


def test_observer_sees_reveal_and_loss_synchronously():
    bus = EventBus()
    world = create_world(bus)
    mines = MineGridSystem(world, bus, rows=2, cols=2, mines=1, rng=random.Random(3))
    mines.reset(mine_positions=[(0, 0)])

    observer = _Recorder()
    connect_observer(bus, observer)

    mines.reveal(1, 1)
    assert observer.changes == [(SceneId.MINES, "reveal")]

    mines.reveal(0, 0)
    assert observer.game_overs == [SceneId.MINES]
    assert observer.changes[-1] == (SceneId.MINES, "reveal")
    assert observer.wins == []


def test_observer_sees_win_once():
    bus = EventBus()
    world = create_world(bus)
    mines = MineGridSystem(world, bus, rows=2, cols=2, mines=1)
    mines.reset(mine_positions=[(0, 0)])
    observer = _Recorder()
    connect_observer(bus, observer)

    for cell in ((0, 1), (1, 0), (1, 1)):
        mines.reveal(*cell)
    mines.reveal(0, 0)

    assert observer.wins == [SceneId.MINES]
    assert observer.game_overs == []
