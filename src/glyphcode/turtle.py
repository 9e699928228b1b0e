"""Turtle that records machine motions for glyph-space drawing commands."""

from dataclasses import dataclass, field

import numpy as np

from .mapper import CoordinateMapper
from .vector import ZERO, Vector2


@dataclass(frozen=True)
class Rapid:
    """Pen-up move."""

    x: float
    y: float


@dataclass(frozen=True)
class Feed:
    """Pen-down linear move; an axis left as None keeps its current value."""

    x: float | None = None
    y: float | None = None


@dataclass(frozen=True)
class PenDown:
    pass


@dataclass(frozen=True)
class PenUp:
    pass


Motion = Rapid | Feed | PenDown | PenUp


@dataclass
class Turtle:
    """Pen state machine in glyph space, emitting absolute motions."""

    mapper: CoordinateMapper
    position: Vector2 = ZERO
    pen_up: bool = True
    motions: list = field(default_factory=list)

    def pen_down(self):
        if self.pen_up:
            self.pen_up = False
            self.motions.append(PenDown())

    def pen_up_cmd(self):
        if not self.pen_up:
            self.pen_up = True
            self.motions.append(PenUp())

    def jump_to(self, point: Vector2):
        self.pen_up_cmd()
        self.position = point
        target = self.mapper.absolute(point)
        self.motions.append(Rapid(target.x, target.y))

    def move_to(self, point: Vector2):
        self.position = point
        target = self.mapper.absolute(point)
        self.motions.append(Feed(target.x, target.y))

    def move_x(self, x: float):
        self.position = Vector2(x, self.position.y)
        self.motions.append(Feed(x=self.mapper.absolute_x(x)))

    def move_y(self, y: float):
        self.position = Vector2(self.position.x, y)
        self.motions.append(Feed(y=self.mapper.absolute_y(y)))

    def trace(self, points):
        for point in points:
            self.move_to(point)


def extent(motions: list) -> np.ndarray | None:
    """Bounding box [[min_x, min_y], [max_x, max_y]] of every position visited."""
    x = y = None
    visited = []
    for motion in motions:
        if isinstance(motion, (Rapid, Feed)):
            x = motion.x if motion.x is not None else x
            y = motion.y if motion.y is not None else y
            if x is not None and y is not None:
                visited.append((x, y))
    if not visited:
        return None
    points = np.asarray(visited, dtype=float)
    return np.stack([points.min(axis=0), points.max(axis=0)])
