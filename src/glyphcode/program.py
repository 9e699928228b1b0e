"""Glyph drawing programs as data.

A program is a tuple of directives in glyph space. Drawing directives start from
the turtle's current position, so a program normally reads: ``MoveTo``,
``PenDown``, drawing directives, ``PenUp``. The builder functions at the bottom
produce that sequence for the common single-stroke shapes.
"""

from dataclasses import dataclass

from .vector import Vector2, vec


@dataclass(frozen=True)
class MoveTo:
    point: Vector2


@dataclass(frozen=True)
class PenDown:
    pass


@dataclass(frozen=True)
class PenUp:
    pass


@dataclass(frozen=True)
class LineTo:
    point: Vector2


@dataclass(frozen=True)
class XLineTo:
    x: float


@dataclass(frozen=True)
class YLineTo:
    y: float


@dataclass(frozen=True)
class ArcTo:
    end: Vector2
    radius: float
    clockwise: bool = True


@dataclass(frozen=True)
class CircleFrom:
    """Full circle around `center` starting and ending at the current position."""

    center: Vector2
    clockwise: bool = True


@dataclass(frozen=True)
class Dot:
    """Small circle whose radius is the session dot size, centered at `center`."""

    center: Vector2


@dataclass(frozen=True)
class Polyline:
    """Lines through `points`; the first point is the current position."""

    points: tuple[Vector2, ...]


@dataclass(frozen=True)
class LineIntoArc:
    center: Vector2
    end: Vector2
    clockwise: bool = True


@dataclass(frozen=True)
class ArcIntoArc:
    start_center: Vector2
    end: Vector2
    end_center: Vector2
    start_clockwise: bool = True
    end_clockwise: bool = True


@dataclass(frozen=True)
class ArcChain:
    end: Vector2
    curves: tuple[tuple[Vector2, float, bool], ...]


@dataclass(frozen=True)
class Fillet:
    """Line to a rounded `corner`, then on toward `after`.

    Always rounded with the session corner radius, whatever the polyline setting.
    """

    corner: Vector2
    after: Vector2


Directive = (
    MoveTo | PenDown | PenUp | LineTo | XLineTo | YLineTo | ArcTo | CircleFrom
    | Dot | Polyline | LineIntoArc | ArcIntoArc | ArcChain | Fillet
)


@dataclass(frozen=True)
class Glyph:
    width: float
    program: tuple[Directive, ...] = ()


def stroke(start, *directives) -> tuple:
    """Move to `start`, engage, run `directives`, disengage."""
    return (MoveTo(vec(start)), PenDown(), *directives, PenUp())


def line(start, end) -> tuple:
    return stroke(start, LineTo(vec(end)))


def x_line(start, x: float) -> tuple:
    return stroke(start, XLineTo(x))


def y_line(start, y: float) -> tuple:
    return stroke(start, YLineTo(y))


def polyline(*points) -> tuple:
    return stroke(points[0], Polyline(tuple(vec(p) for p in points)))


def arc(start, end, radius: float, clockwise: bool = True) -> tuple:
    return stroke(start, ArcTo(vec(end), radius, clockwise))


def circle(start, center, clockwise: bool = True) -> tuple:
    return stroke(start, CircleFrom(vec(center), clockwise))


def dot(center) -> tuple:
    return (Dot(vec(center)),)
