"""The capability set a scene offers to the SceneController.

Scenes are duck-typed: anything providing some of these methods can be
registered. The controller treats every missing hook as a no-op, so a scene
only writes the methods it actually needs.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from minigames.components.pointer import PointerEvent


@runtime_checkable
class PlayableScene(Protocol):
    def reset(self) -> None: ...

    def on_enter(self) -> None: ...

    def on_exit(self) -> None: ...

    def tick(self, dt_ms: float) -> None: ...

    def handle_input(self, event: PointerEvent) -> None: ...

    def is_terminal(self) -> bool: ...

    def render(self, surface: Any) -> None: ...


def call_hook(scene: object, name: str, *args: Any) -> Any:
    """Invoke ``scene.<name>(*args)`` if the scene provides it."""
    hook = getattr(scene, name, None)
    if hook is None or not callable(hook):
        return None
    return hook(*args)
