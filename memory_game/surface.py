from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Protocol

Color = tuple[int, int, int, int]
Point = tuple[float, float]
# Two control points and an end point
Bezier_Segment = tuple[Point, Point, Point]


class Draw_Surface(Protocol):
    def clear(self, color: Color) -> None: ...
    def push_transform(self) -> None: ...
    def pop_transform(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def scale(self, sx: float, sy: float) -> None: ...
    def fill_rounded_rect(self, x: float, y: float, w: float, h: float, radius: float, color: Color) -> None: ...
    def fill_curve(self, start: Point, segments: list[Bezier_Segment], color: Color) -> None: ...
    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None: ...


class Pointer_Source(Protocol):
    def poll_taps(self) -> list[Point]:
        """Taps since the last poll, in surface-local coordinates."""
        ...


@dataclass(frozen=True)
class Draw_Command:
    name: str
    args: tuple


@dataclass
class Recording_Surface:
    """Headless surface that keeps every draw call since the last clear()."""
    commands: list[Draw_Command] = field(default_factory=list)
    depth: int = 0

    def _record(self, name: str, *args) -> None:
        self.commands.append(Draw_Command(name, args))

    def clear(self, color: Color) -> None:
        self.commands.clear()
        self._record("clear", color)

    def push_transform(self) -> None:
        self.depth += 1
        self._record("push_transform")

    def pop_transform(self) -> None:
        if self.depth == 0:
            raise ValueError("pop_transform without matching push_transform")
        self.depth -= 1
        self._record("pop_transform")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)

    def fill_rounded_rect(self, x, y, w, h, radius, color) -> None:
        self._record("fill_rounded_rect", x, y, w, h, radius, color)

    def fill_curve(self, start, segments, color) -> None:
        self._record("fill_curve", start, tuple(segments), color)

    def draw_image(self, image, x, y, w, h) -> None:
        self._record("draw_image", image, x, y, w, h)

    def named(self, name: str) -> list[Draw_Command]:
        return [c for c in self.commands if c.name == name]
