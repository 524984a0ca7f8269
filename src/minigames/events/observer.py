"""Observer contract for engine notifications.

Engines never hold callback objects. They emit named events on the shared
``EventBus`` at fixed points:

* ``EVENT_STATE_CHANGED`` at the end of every operation that mutated the board
  (reset, reveal, flag, movement, a tick that moved or locked a piece, a cell
  edit).
* ``EVENT_GAME_OVER`` when a mine is revealed or a block spawn fails.
* ``EVENT_WIN`` when the last safe mine cell is revealed or a number puzzle
  matches its solution.

All emissions are synchronous: handlers run before the engine call returns.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from minigames.components.game_state import SceneId
from minigames.events.bus import EVENT_GAME_OVER, EVENT_STATE_CHANGED, EVENT_WIN, EventBus


@runtime_checkable
class GameObserver(Protocol):
    def on_state_changed(self, scene: SceneId, reason: str) -> None: ...

    def on_game_over(self, scene: SceneId) -> None: ...

    def on_win(self, scene: SceneId) -> None: ...


def connect_observer(event_bus: EventBus, observer: GameObserver) -> None:
    """Route the engine notification events to ``observer``'s methods."""

    def _state_changed(sender, **payload) -> None:
        observer.on_state_changed(payload.get("scene"), payload.get("reason", ""))

    def _game_over(sender, **payload) -> None:
        observer.on_game_over(payload.get("scene"))

    def _win(sender, **payload) -> None:
        observer.on_win(payload.get("scene"))

    event_bus.subscribe(EVENT_STATE_CHANGED, _state_changed)
    event_bus.subscribe(EVENT_GAME_OVER, _game_over)
    event_bus.subscribe(EVENT_WIN, _win)
