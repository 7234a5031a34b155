from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Phase(Enum):
    IDLE = "idle"            # accepting taps, 0 or 1 card selected
    ANIMATING = "animating"  # exactly one flip in flight
    RESOLVING = "resolving"  # two cards face up, waiting to revert
    WON = "won"              # all pairs matched, until reset


@dataclass
class Card:
    x: float
    y: float
    width: float
    height: float
    face_id: int
    z: int = 0  # Stack order, reserved for draw order
    revealed: bool = False
    flip_progress: float = 0.0  # Angle in [0, pi]

    def contains(self, px: float, py: float) -> bool:
        """Check if point (px, py) is inside the card bounds, edges included."""
        return (self.x <= px <= self.x + self.width and
                self.y <= py <= self.y + self.height)

    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Flip:
    card: Card
    target_revealed: bool
    start_progress: float
    elapsed: float = 0.0


@dataclass
class Board_State:
    cards: list[Card] = field(default_factory=list)
    selected: list[Card] = field(default_factory=list)
    matched_pairs: int = 0
    total_pairs: int = 0
    phase: Phase = Phase.IDLE

    flip: Flip | None = None
    pending_reverts: list[Card] = field(default_factory=list)
    timer: float | None = None  # Milliseconds until the pending revert or victory
    victory_shown: bool = False

    @property
    def animation_lock(self) -> bool:
        return self.phase in (Phase.ANIMATING, Phase.RESOLVING)
