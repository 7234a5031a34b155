from __future__ import annotations
import math
from typing import Callable, Optional
from memory_game.models import Card, Flip, Board_State, Phase
from memory_game.config import tweak as default_tweak
from memory_game.board import check_grid, create_cards
from memory_game.surface import Draw_Surface, Pointer_Source
from memory_game.rendering import draw_board


class Memory_Game:
    """Turn/match state machine for one memory board.

    Time only moves through update(dt), so the whole game can be driven
    headless: pass no surface and feed taps to handle_tap() directly.
    """

    def __init__(
        self,
        surface: Optional[Draw_Surface] = None,
        pointer: Optional[Pointer_Source] = None,
        images: Optional[Callable] = None,
        on_victory: Optional[Callable[[], None]] = None,
        rng=None,
        settings: Optional[dict] = None,
    ):
        self.tweak = {**default_tweak, **(settings or {})}
        self.columns = self.tweak["grid_columns"]
        self.rows = self.tweak["grid_rows"]
        check_grid(self.columns, self.rows)
        if self.tweak["flip_duration"] <= 0:
            raise ValueError("flip_duration must be positive")

        self.surface = surface
        self.pointer = pointer
        self.images = images
        self.on_victory = on_victory
        self.rng = rng

        self.messages: list[str] = []
        self.state = Board_State()
        self.reset()

    # Read-only views used by the shell and tests
    @property
    def cards(self) -> list[Card]:
        return self.state.cards

    @property
    def selected(self) -> list[Card]:
        return self.state.selected

    @property
    def matched_pairs(self) -> int:
        return self.state.matched_pairs

    @property
    def total_pairs(self) -> int:
        return self.state.total_pairs

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def animation_lock(self) -> bool:
        return self.state.animation_lock

    @property
    def victory_shown(self) -> bool:
        return self.state.victory_shown

    def message(self, text: str) -> None:
        self.messages.append(text)
        if len(self.messages) > self.tweak["max_messages"]:
            self.messages.pop(0)

    def card_at_cell(self, row: int, col: int) -> Card:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise ValueError("invalid cell")
        return self.state.cards[row * self.columns + col]

    def reset(self) -> None:
        """Start a new round, discarding any flip or timer in flight."""
        cards = create_cards(self.columns, self.rows, self.rng, self.tweak)
        self.state = Board_State(cards=cards, total_pairs=len(cards) // 2)
        self.message(f"New round: {self.state.total_pairs} pairs to find.")

    # Input

    def handle_tap(self, x: float, y: float) -> bool:
        """Reveal the first face-down card under (x, y). Returns True if a flip started."""
        if self.state.phase != Phase.IDLE:
            return False
        for card in self.state.cards:
            if card.contains(x, y) and not card.revealed:
                self.begin_flip(card, True)
                return True
        return False

    # Animation

    def begin_flip(self, card: Card, target_revealed: bool) -> None:
        if self.state.flip is not None:
            raise ValueError("a flip is already in progress")
        if target_revealed:
            if self.state.phase != Phase.IDLE or card.revealed:
                raise ValueError("cannot reveal a card now")
        elif (self.state.phase == Phase.IDLE or not card.revealed
              or not any(c is card for c in self.state.selected)):
            raise ValueError("only a selected card can be turned back")
        self.state.flip = Flip(card=card, target_revealed=target_revealed, start_progress=card.flip_progress)
        self.state.phase = Phase.ANIMATING

    def _step_flip(self, dt: float) -> None:
        flip = self.state.flip
        flip.elapsed += dt
        progress = min(flip.elapsed / self.tweak["flip_duration"], 1.0)
        target = math.pi if flip.target_revealed else 0.0
        flip.card.flip_progress = flip.start_progress + (target - flip.start_progress) * progress
        if progress < 1.0:
            return

        flip.card.flip_progress = target
        flip.card.revealed = flip.target_revealed
        self.state.flip = None
        if flip.target_revealed:
            self._on_revealed(flip.card)
        else:
            self._on_reverted()

    def _on_revealed(self, card: Card) -> None:
        self.state.selected.append(card)
        if len(self.state.selected) < 2:
            self.state.phase = Phase.IDLE
        else:
            self.state.phase = Phase.RESOLVING
            self.resolve()

    def _on_reverted(self) -> None:
        if self.state.pending_reverts:
            self.begin_flip(self.state.pending_reverts.pop(0), False)
            return
        self.state.selected.clear()
        self.state.phase = Phase.IDLE

    # Matching

    def resolve(self) -> None:
        if self.state.phase != Phase.RESOLVING or len(self.state.selected) != 2:
            raise ValueError("resolve needs exactly two selected cards")
        first, second = self.state.selected

        if first.face_id == second.face_id:
            self.state.matched_pairs += 1
            self.state.selected.clear()
            self.message(f"Match! {self.state.matched_pairs}/{self.state.total_pairs} pairs.")
            if self.state.matched_pairs == self.state.total_pairs:
                self.state.phase = Phase.WON
                self.state.timer = self.tweak["victory_delay"]
            else:
                self.state.phase = Phase.IDLE
            return

        self.message("No match.")
        self.state.pending_reverts = [first, second]
        self.state.timer = self.tweak["mismatch_delay"]

    def _on_timer(self) -> None:
        self.state.timer = None
        if self.state.phase == Phase.WON:
            if not self.state.victory_shown:
                self.state.victory_shown = True
                self.message("Round complete!")
                if self.on_victory is not None:
                    self.on_victory()
            return
        self.begin_flip(self.state.pending_reverts.pop(0), False)

    # Clock

    def update(self, dt: float) -> None:
        """Advance the game clock by dt milliseconds."""
        if self.state.flip is not None:
            self._step_flip(dt)
        elif self.state.timer is not None:
            self.state.timer -= dt
            if self.state.timer <= 0:
                self._on_timer()

    def draw(self) -> None:
        if self.surface is not None:
            draw_board(self.surface, self.state, self.images, self.tweak)

    def frame(self, dt: float) -> None:
        """One frame: taps, then animation, then render."""
        if self.pointer is not None:
            for x, y in self.pointer.poll_taps():
                self.handle_tap(x, y)
        self.update(dt)
        self.draw()
