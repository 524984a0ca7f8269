from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of scenes that nobody else references alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                  # payload: dt=float (milliseconds)


# ============================================================================
# INPUT
# ============================================================================
EVENT_POINTER = "pointer"                            # payload: event=PointerEvent


# ============================================================================
# SCENE FLOW
# ============================================================================
EVENT_SCENE_SWITCH_REQUEST = "scene_switch_request"  # payload: scene_id=SceneId
EVENT_SCENE_CHANGED = "scene_changed"                # payload: previous_scene=SceneId|None, new_scene=SceneId


# ============================================================================
# ENGINE NOTIFICATIONS
# ============================================================================
EVENT_STATE_CHANGED = "scene_state_changed"          # payload: scene=SceneId, reason=str
EVENT_GAME_OVER = "scene_game_over"                  # payload: scene=SceneId, score=int|None
EVENT_WIN = "scene_won"                              # payload: scene=SceneId
EVENT_LINES_CLEARED = "lines_cleared"                # payload: scene=SceneId, lines=int, score=int, level=int
