"""Default single-stroke glyph table.

Coordinates are in glyph space: baseline at y=0, cap height at y=1, descenders
down to y=-0.5.
"""

import math

from .program import (
    ArcIntoArc,
    ArcTo,
    CircleFrom,
    Glyph,
    LineIntoArc,
    LineTo,
    Polyline,
    XLineTo,
    YLineTo,
    arc,
    circle,
    dot,
    line,
    polyline,
    stroke,
    x_line,
    y_line,
)
from .vector import vec

# radius of the dot hanging off ',' and ';'
DOT_SIZE = 0.025

PAREN_WIDTH = 1 - math.sin(math.pi / 3)


def lines(*points) -> Polyline:
    return Polyline(tuple(vec(p) for p in points))


def arc_to(end, radius: float, clockwise: bool = True) -> ArcTo:
    return ArcTo(vec(end), radius, clockwise)


def circle_from(center, clockwise: bool = True) -> CircleFrom:
    return CircleFrom(vec(center), clockwise)


def comma() -> tuple:
    return stroke(
        (0, -0.125),
        arc_to((0.125, 0.0), 0.125, clockwise=False),
        circle_from((0.125 - DOT_SIZE, 0.0), clockwise=False),
    )


GLYPHS: dict[str, Glyph] = {
    " ": Glyph(0.3),
    "!": Glyph(0, (*y_line((0, 1), 0.25), *dot((0, 0)))),
    '"': Glyph(0.1, (*y_line((0, 1), 0.75), *y_line((0.1, 1), 0.75))),
    "#": Glyph(0.6, (
        *y_line((0.2, 0), 0.6),
        *y_line((0.4, 0.6), 0),
        *x_line((0.6, 0.2), 0),
        *x_line((0, 0.4), 0.6),
    )),
    "$": Glyph(0.4, (
        *y_line((0.2, 1), 0),
        *stroke(
            (0, 0.3),
            arc_to((0.4, 0.3), 0.2, clockwise=False),
            arc_to((0.2, 0.5), 0.2, clockwise=False),
            arc_to((0, 0.7), 0.2),
            arc_to((0.4, 0.7), 0.2),
        ),
    )),
    "%": Glyph(0.5, (
        *circle((0.25, 0.875), (0.125, 0.875)),
        *circle((0.25, 0.125), (0.375, 0.125)),
        *line((0, 0), (0.5, 1)),
    )),
    "&": Glyph(0.5, stroke(
        (0.5, 0),
        LineIntoArc(vec((0.25, 0.85)), vec((0.25, 1))),
        ArcIntoArc(vec((0.25, 0.85)), vec((0.25, 0.0)), vec((0.25, 0.25)), end_clockwise=False),
        arc_to((0.5, 0.25), 0.25, clockwise=False),
    )),
    "'": Glyph(0, y_line((0, 1), 0.75)),
    "(": Glyph(PAREN_WIDTH, arc((PAREN_WIDTH, 1), (PAREN_WIDTH, 0), 1, clockwise=False)),
    ")": Glyph(PAREN_WIDTH, arc((0, 1), (0, 0), 1)),
    "*": Glyph(0.5, stroke(
        (0.5, 0.75),
        lines((0.5, 0.75), (0.25, 0.75), (0.375, 0.5335)),
        lines((0.375, 0.5335), (0.25, 0.75), (0.125, 0.5335)),
        lines((0.125, 0.5335), (0.25, 0.75), (0, 0.75)),
        lines((0, 0.75), (0.25, 0.75), (0.125, 0.9665)),
        lines((0.125, 0.9665), (0.25, 0.75), (0.375, 0.9665)),
        lines((0.375, 0.9665), (0.25, 0.75), (0.5, 0.75)),
    )),
    "+": Glyph(0.5, stroke(
        (0.5, 0.5),
        lines((0.5, 0.5), (0.25, 0.5), (0.25, 0.25)),
        lines((0.25, 0.25), (0.25, 0.5), (0, 0.5)),
        lines((0, 0.5), (0.25, 0.5), (0.25, 0.75)),
        lines((0.25, 0.75), (0.25, 0.5), (0.5, 0.5)),
    )),
    ",": Glyph(0.125, comma()),
    "-": Glyph(0.3, line((0, 0.5), (0.3, 0.5))),
    ".": Glyph(0, dot((0, 0))),
    "/": Glyph(0.5, line((0, 0), (0.5, 1))),
    "0": Glyph(0.5, stroke(
        (0.5, 0.75),
        YLineTo(0.25),
        arc_to((0, 0.25), 0.25),
        YLineTo(0.75),
        arc_to((0.5, 0.75), 0.25),
    )),
    "1": Glyph(0.2, (*polyline((0, 0.9), (0.1, 1), (0.1, 0)), *x_line((0, 0), 0.2))),
    "2": Glyph(0.5, stroke(
        (0, 0.75),
        arc_to((0.5, 0.75), 0.25),
        arc_to((0.45, 0.6), 0.25),
        lines((0.45, 0.6), (0, 0), (0.5, 0)),
    )),
    "3": Glyph(0.5, stroke(
        (0, 1),
        lines((0, 1), (0.5, 1), (0.25, 0.5)),
        arc_to((0.25, 0), 0.25),
        arc_to((0, 0.25), 0.25),
    )),
    "4": Glyph(0.5, polyline((1 / 3, 0), (1 / 3, 1), (0, 1 / 3), (0.5, 1 / 3))),
    "5": Glyph(0.5, stroke(
        (0, 0),
        XLineTo(0.25),
        arc_to((0.25, 0.5), 0.25, clockwise=False),
        lines((0.25, 0.5), (0, 0.5), (0, 1), (0.5, 1)),
    )),
    "6": Glyph(0.5, stroke(
        (0, 0.25),
        circle_from((0.25, 0.25)),
        arc_to((0.5, 1), 13 / 16),
    )),
    "7": Glyph(0.5, polyline((0, 0), (0.5, 1), (0, 1))),
    "8": Glyph(0.5, stroke(
        (0.25, 0.5),
        circle_from((0.25, 0.75)),
        circle_from((0.25, 0.25), clockwise=False),
    )),
    "9": Glyph(0.5, stroke(
        (0.5, 0.75),
        circle_from((0.25, 0.75)),
        YLineTo(0),
    )),
    ":": Glyph(0.05, (*dot((0, 0.5)), *dot((0, 0)))),
    ";": Glyph(0.125, (*comma(), *dot((0.125 - DOT_SIZE, 0.5)))),
    "<": Glyph(0.5, polyline((0.5, 0.75), (0, 0.5), (0.5, 0.25))),
    "=": Glyph(0.3, (*line((0, 0.6), (0.3, 0.6)), *line((0.3, 0.4), (0, 0.4)))),
    ">": Glyph(0.5, polyline((0, 0.25), (0.5, 0.5), (0, 0.75))),
    "?": Glyph(0.5, (
        *stroke((0, 1), arc_to((0, 0.5), 0.25), LineTo(vec((0, 0.25)))),
        *dot((0, 0)),
    )),
    "@": Glyph(1, stroke(
        (0.75, 0.75),
        YLineTo(0.5),
        circle_from((0.5, 0.5)),
        arc_to((1, 0.5), 0.125, clockwise=False),
        arc_to((0, 0.5), 0.5, clockwise=False),
        arc_to((0.5, 0), 0.5, clockwise=False),
    )),
    "A": Glyph(0.5, (*x_line((0.375, 0.5), 0.125), *polyline((0, 0), (0.25, 1), (0.5, 0)))),
    "B": Glyph(0.5, stroke(
        (0.25, 0),
        lines((0.25, 0), (0, 0), (0, 0.5), (0.25, 0.5)),
        lines((0.25, 0.5), (0, 0.5), (0, 1), (0.25, 1)),
        arc_to((0.25, 0.5), 0.25),
        arc_to((0.25, 0), 0.25),
    )),
    "C": Glyph(1, stroke(
        (1, 1),
        XLineTo(0.5),
        arc_to((0.5, 0), 0.5, clockwise=False),
        XLineTo(1),
    )),
    "D": Glyph(0.5, stroke((0, 0), YLineTo(1), arc_to((0, 0), 0.5))),
    "E": Glyph(0.5, stroke(
        (0.5, 0),
        lines((0.5, 0), (0, 0), (0, 0.5), (0.5, 0.5)),
        lines((0.5, 0.5), (0, 0.5), (0, 1), (0.5, 1)),
    )),
    "F": Glyph(0.5, stroke(
        (0, 0),
        lines((0, 0), (0, 0.5), (0.5, 0.5)),
        lines((0.5, 0.5), (0, 0.5), (0, 1), (0.5, 1)),
    )),
    "G": Glyph(0.75, stroke(
        (0.75, 1),
        XLineTo(0.5),
        arc_to((0, 0.5), 0.5, clockwise=False),
        arc_to((0.5, 0), 0.5, clockwise=False),
        lines((0.5, 0), (0.75, 0), (0.75, 0.5), (0.375, 0.5)),
    )),
    "H": Glyph(0.5, (*y_line((0, 1), 0), *x_line((0, 0.5), 0.5), *y_line((0.5, 1), 0))),
    "I": Glyph(0.2, (*x_line((0, 1), 0.2), *y_line((0.1, 1), 0), *x_line((0, 0), 0.2))),
    "J": Glyph(0.5, stroke(
        (0, 0.25),
        arc_to((0.5, 0.25), 0.25, clockwise=False),
        YLineTo(1),
    )),
    "K": Glyph(0.5, (*y_line((0, 1), 0), *polyline((0.5, 0), (0, 0.5), (0.5, 1)))),
    "L": Glyph(0.5, polyline((0, 1), (0, 0), (0.5, 0))),
    "M": Glyph(0.5, polyline((0, 0), (0, 1), (0.25, 0.5), (0.5, 1), (0.5, 0))),
    "N": Glyph(0.5, polyline((0, 0), (0, 1), (0.5, 0), (0.5, 1))),
    "O": Glyph(1, circle((1, 0.5), (0.5, 0.5), clockwise=False)),
    "P": Glyph(0.5, stroke(
        (0, 0),
        lines((0, 0), (0, 1), (0.25, 1)),
        arc_to((0.25, 0.5), 0.25),
        XLineTo(0),
    )),
    "Q": Glyph(1, stroke(
        (0.5, 0),
        circle_from((0.5, 0.5)),
        arc_to((0.75, -0.25), 0.25, clockwise=False),
    )),
    "R": Glyph(0.5, stroke(
        (0, 0),
        lines((0, 0), (0, 1), (0.25, 1)),
        arc_to((0.25, 0.5), 0.25),
        lines((0.25, 0.5), (0, 0.5), (0.5, 0)),
    )),
    "S": Glyph(0.5, stroke(
        (0, 0.25),
        arc_to((0.5, 0.25), 0.25, clockwise=False),
        arc_to((0.25, 0.5), 0.25, clockwise=False),
        arc_to((0, 0.75), 0.25),
        arc_to((0.5, 0.75), 0.25),
    )),
    "T": Glyph(0.5, (*y_line((0.25, 0), 1), *x_line((0, 1), 0.5))),
    "U": Glyph(0.5, stroke(
        (0, 1),
        YLineTo(0.25),
        arc_to((0.5, 0.25), 0.25, clockwise=False),
        YLineTo(1),
    )),
    "V": Glyph(0.5, polyline((0, 1), (0.25, 0), (0.5, 1))),
    "W": Glyph(1, polyline((0, 1), (0.25, 0), (0.5, 0.5), (0.75, 0), (1, 1))),
    "X": Glyph(0.5, (*line((0, 1), (0.5, 0)), *line((0, 0), (0.5, 1)))),
    "Y": Glyph(0.5, stroke(
        (0, 1),
        lines((0, 1), (0.25, 0.5), (0.25, 0)),
        lines((0.25, 0), (0.25, 0.5), (0.5, 1)),
    )),
    "Z": Glyph(1, polyline((0, 1), (1, 1), (0, 0), (1, 0))),
    "[": Glyph(0.2, polyline((0.2, 1), (0, 1), (0, 0), (0.2, 0))),
    "\\": Glyph(0.5, line((0, 1), (0.5, 0))),
    "]": Glyph(0.2, polyline((0, 1), (0.2, 1), (0.2, 0), (0, 0))),
    "^": Glyph(0.5, polyline((0, 0.75), (0.25, 1), (0.5, 0.75))),
    "_": Glyph(0.5, line((0, 0), (0.5, 0))),
    "`": Glyph(0.3, line((0, 1), (0.3, 0.7))),
    "a": Glyph(0.5, stroke(
        (0.5, 0.5),
        YLineTo(0.25),
        circle_from((0.25, 0.25)),
        YLineTo(0),
    )),
    "b": Glyph(0.5, stroke(
        (0, 1),
        YLineTo(0.25),
        circle_from((0.25, 0.25), clockwise=False),
    )),
    "c": Glyph(0.5, stroke(
        (0.5, 0.5),
        XLineTo(0.25),
        arc_to((0.25, 0), 0.25, clockwise=False),
        XLineTo(0.5),
    )),
    "d": Glyph(0.5, stroke(
        (0.5, 0),
        YLineTo(0.25),
        circle_from((0.25, 0.25), clockwise=False),
        YLineTo(1),
    )),
    "e": Glyph(0.5, stroke(
        (0, 0.25),
        XLineTo(0.5),
        arc_to((0, 0.25), 0.25, clockwise=False),
        arc_to((0.25, 0), 0.25, clockwise=False),
        XLineTo(0.5),
    )),
    "f": Glyph(0.5, (
        *x_line((0, 0.5), 0.5),
        *stroke((0.25, 0), YLineTo(0.75), arc_to((0.5, 1), 0.25)),
    )),
    "g": Glyph(0.5, stroke(
        (0, 0),
        arc_to((0.5, 0), 0.25, clockwise=False),
        YLineTo(0.25),
        circle_from((0.25, 0.25), clockwise=False),
    )),
    "h": Glyph(0.5, stroke(
        (0, 1),
        YLineTo(0),
        YLineTo(0.25),
        arc_to((0.5, 0.25), 0.25),
        YLineTo(0),
    )),
    "i": Glyph(0, (*y_line((0, 0), 0.5), *dot((0, 0.75)))),
    "j": Glyph(0.5, (
        *stroke((0, -0.25), arc_to((0.5, -0.25), 0.25, clockwise=False), YLineTo(0.5)),
        *dot((0.5, 0.75)),
    )),
    "k": Glyph(0.5, (*y_line((0, 1), 0), *polyline((0.5, 0), (0, 0.25), (0.5, 0.5)))),
    "l": Glyph(0.2, polyline((0, 1), (0, 0), (0.2, 0))),
    "m": Glyph(0.5, stroke(
        (0, 0),
        YLineTo(0.375),
        arc_to((0.25, 0.375), 0.125),
        YLineTo(0),
        YLineTo(0.375),
        arc_to((0.5, 0.375), 0.125),
        YLineTo(0),
    )),
    "n": Glyph(0.5, stroke(
        (0, 0),
        YLineTo(0.25),
        arc_to((0.5, 0.25), 0.25),
        YLineTo(0),
    )),
    "o": Glyph(0.5, circle((0.5, 0.25), (0.25, 0.25))),
    "p": Glyph(0.5, stroke(
        (0, 0.5),
        YLineTo(0.25),
        circle_from((0.25, 0.25), clockwise=False),
        YLineTo(-0.5),
    )),
    "q": Glyph(0.5, stroke(
        (0.5, 0.25),
        circle_from((0.25, 0.25)),
        YLineTo(-0.5),
    )),
    "r": Glyph(0.5, stroke(
        (0, 0.5),
        YLineTo(0),
        YLineTo(0.25),
        arc_to((0.5, 0.25), 0.25),
    )),
    "s": Glyph(0.5, stroke(
        (0, 0.125),
        arc_to((0.125, 0), 0.125, clockwise=False),
        XLineTo(0.375),
        arc_to((0.375, 0.25), 0.125, clockwise=False),
        XLineTo(0.125),
        arc_to((0.125, 0.5), 0.125),
        XLineTo(0.375),
        arc_to((0.5, 0.375), 0.125),
    )),
    "t": Glyph(0.5, (*y_line((0.25, 0), 1), *x_line((0, 0.75), 0.5))),
    "u": Glyph(0.5, stroke(
        (0, 0.5),
        YLineTo(0.25),
        arc_to((0.5, 0.25), 0.25, clockwise=False),
        YLineTo(0.5),
    )),
    "v": Glyph(0.5, polyline((0, 0.5), (0.25, 0), (0.5, 0.5))),
    "w": Glyph(0.5, stroke(
        (0, 0.5),
        YLineTo(0.125),
        arc_to((0.25, 0.125), 0.125, clockwise=False),
        YLineTo(0.5),
        YLineTo(0.125),
        arc_to((0.5, 0.125), 0.125, clockwise=False),
        YLineTo(0.5),
    )),
    "x": Glyph(0.5, (*line((0, 0.5), (0.5, 0)), *line((0, 0), (0.5, 0.5)))),
    "y": Glyph(0.5, (*line((0, 0.5), (0.25, 0)), *line((0, -0.5), (0.5, 0.5)))),
    "z": Glyph(0.5, polyline((0, 0.5), (0.5, 0.5), (0, 0), (0.5, 0))),
    "{": Glyph(0.5, stroke(
        (0.5, 1),
        XLineTo(0.375),
        arc_to((0.25, 0.875), 0.125, clockwise=False),
        YLineTo(0.625),
        arc_to((0.125, 0.5), 0.125),
        XLineTo(0),
        XLineTo(0.125),
        arc_to((0.25, 0.375), 0.125),
        YLineTo(0.125),
        arc_to((0.375, 0), 0.125, clockwise=False),
        XLineTo(0.5),
    )),
    "|": Glyph(0, line((0, 0), (0, 1))),
    "}": Glyph(0.5, stroke(
        (0, 1),
        XLineTo(0.125),
        arc_to((0.25, 0.875), 0.125),
        YLineTo(0.625),
        arc_to((0.375, 0.5), 0.125, clockwise=False),
        XLineTo(0.5),
        XLineTo(0.375),
        arc_to((0.25, 0.375), 0.125, clockwise=False),
        YLineTo(0.125),
        arc_to((0.125, 0), 0.125),
        XLineTo(0),
    )),
    "~": Glyph(0.5, stroke(
        (0, 0.5),
        arc_to((0.25, 0.5), math.sqrt(0.05)),
        arc_to((0.5, 0.5), math.sqrt(0.05), clockwise=False),
    )),
    "あ": Glyph(1, (
        *arc((0.175 + 0.037, 1 - 0.272), (0.760 - 0.037, 1 - 0.221), 3, clockwise=False),
        *arc((0.404, 1 - 0.051 - 0.037), (0.475, 1 - 0.815), 1, clockwise=False),
        *stroke(
            (0.624, 1 - 0.381),
            arc_to((0.287, 1 - 0.873), 0.6),
            arc_to((0.176, 1 - 0.785), 0.083),
            arc_to((0.555, 1 - 0.444), 0.4),
            arc_to((0.770, 1 - 0.480), 0.667),
            arc_to((0.765, 1 - 0.866), 0.205),
            arc_to((0.639, 1 - 0.901), 0.8),
        ),
    )),
    "は": Glyph(1, (
        *arc((0.2, 1 - 0.15), (0.17, 1 - 0.855), 3, clockwise=False),
        *line((0.369, 1 - 0.344), (0.900, 1 - 0.314)),
        *stroke(
            (0.659, 1 - 0.116),
            LineIntoArc(vec((0.582, 1 - 0.763)), vec((0.617, 1 - 0.849))),
            arc_to((0.527, 1 - 0.863), 0.195),
            arc_to((0.404, 1 - 0.755), 0.12),
            arc_to((0.458, 1 - 0.671), 0.088),
            arc_to((0.585, 1 - 0.666), 0.265),
            arc_to((0.904, 1 - 0.802), 0.765),
        ),
    )),
    "私": Glyph(1, (
        *arc((0.425, 1 - 0.120), (0.115, 1 - 0.168), 3),
        *line((0.067 + 0.037, 1 - 0.321 - 0.037), (0.492 - 0.037, 1 - 0.321 - 0.037)),
        *line((0.246 + 0.037, 1 - 0.129 - 0.037), (0.246 + 0.037, 1 - 0.942 + 0.037)),
        *arc((0.246 + 0.037, 1 - 0.395), (0.088, 1 - 0.715), 0.75),
        *arc((0.3, 0.5), (0.446, 1 - 0.6), 0.75),
        *polyline((0.674, 1 - 0.161), (0.517, 1 - 0.846), (0.845, 1 - 0.781)),
        *arc((0.75, 1 - 0.537), (0.893, 1 - 0.873), 1),
    )),
    "俺": Glyph(1, (
        *arc((0.262, 1 - 0.088), (0.070, 1 - 0.502), 1),
        *line((0.168 + 0.039, 1 - 0.35), (0.168 + 0.039, 1 - 0.938 + 0.039)),
        *line((0.317 + 0.037, 1 - 0.177 - 0.073 * 0.5), (0.918 - 0.037, 1 - 0.177 - 0.073 * 0.5)),
        *arc((0.588, 1 - 0.088), (0.288, 0.5), 0.75),
        *arc((0.675, 1 - 0.218), (0.930, 1 - 0.484), 0.75, clockwise=False),
        *line((0.379 + 0.033, 1 - 0.442 - 0.031), (0.379 + 0.033, 1 - 0.814)),
        *polyline(
            (0.379 + 0.033, 1 - 0.442 - 0.031),
            (0.774 + 0.033, 1 - 0.442 - 0.031),
            (0.774 + 0.033, 1 - 0.700 - 0.031),
        ),
        *line((0.379 + 0.033, 1 - 0.571 - 0.031), (0.774 + 0.033, 1 - 0.571 - 0.031)),
        *line((0.379 + 0.033, 1 - 0.700 - 0.031), (0.774 + 0.033, 1 - 0.700 - 0.031)),
        *stroke(
            (0.567 + 0.0385, 1 - 0.375),
            LineIntoArc(vec((0.666, 1 - 0.8275)), vec((0.666, 1 - 0.856 - 0.032)), clockwise=False),
            LineIntoArc(vec((0.841, 1 - 0.83)), vec((0.897, 1 - 0.848)), clockwise=False),
            LineTo(vec((0.908, 1 - 0.808))),
        ),
    )),
}


def get_glyph(char: str) -> Glyph | None:
    """Get glyph by character."""
    return GLYPHS.get(char)


def list_glyphs() -> list[str]:
    """List characters available in the default table."""
    return list(GLYPHS.keys())
