from __future__ import annotations

import random
from typing import Any, Sequence

from minigames.components.block_board import PieceType
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.events.bus import EventBus


class FixedPieceRandom(random.Random):
    """Seeded RNG whose ``choice`` always hands out the same piece type."""

    def __init__(self, piece_type: PieceType, seed: int = 0):
        super().__init__(seed)
        self.piece_type = piece_type

    def choice(self, seq):
        return self.piece_type


class RecordingSurface:
    """Surface stand-in that keeps every draw call for assertions."""

    pixel_ratio = 1.0

    def __init__(self):
        self.calls: list[tuple[str, tuple, dict]] = []

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", (x, y, width, height, color), {}))

    def stroke_rect(self, x, y, width, height, color, line_width=1.0):
        self.calls.append(("stroke_rect", (x, y, width, height, color), {"line_width": line_width}))

    def draw_text(self, text, x, y, color, size, *, bold=False, anchor="center"):
        self.calls.append(("draw_text", (text, x, y, color, size), {"bold": bold, "anchor": anchor}))

    def draw_path(self, points: Sequence, color, *, line_width=1.0, closed=False, filled=False):
        self.calls.append(
            ("draw_path", (list(points), color), {"line_width": line_width, "closed": closed, "filled": filled})
        )

    def texts(self) -> list[str]:
        return [args[0] for name, args, _ in self.calls if name == "draw_text"]

    def count(self, name: str) -> int:
        return sum(1 for call, _, _ in self.calls if call == name)


def press(x: float, y: float, phase: PointerPhase = PointerPhase.START) -> PointerEvent:
    return PointerEvent(phase, x, y)


def record_events(bus: EventBus, name: str) -> list[dict[str, Any]]:
    """Subscribe to ``name`` and return the list its payloads are appended to."""
    received: list[dict[str, Any]] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
