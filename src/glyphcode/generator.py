"""Instruction generator: renders characters into machine motions."""

import logging
from enum import Enum

from .composer import arc_chain, arc_into_arc, line_into_arc, polyline
from .config import Config
from .corner import round_corner
from .curves import arc_steps, circle_steps
from .errors import ConfigurationError, InputError, SessionStateError
from .gcode import GcodeEncoder
from .glyphs import GLYPHS
from .mapper import CoordinateMapper
from .program import Glyph
from .turtle import Turtle
from .vector import UNIT_X, UNIT_Y, Vector2

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RENDERING = "rendering"


class InstructionGenerator:
    """One rendering session.

    Holds the cursor (left end of the baseline, in machine units) and the font
    settings. The cursor only moves through the setters and after each rendered
    character. Changing the font size keeps the top left corner in place, so
    the baseline moves. Sessions are not thread safe; use one per thread.
    """

    def __init__(
        self,
        config: Config | None = None,
        glyphs: dict[str, Glyph] | None = None,
        encoder: GcodeEncoder | None = None,
    ):
        self.config = config or Config()
        self.glyphs = GLYPHS if glyphs is None else glyphs
        self.encoder = encoder or GcodeEncoder(self.config.gcode)

        font = self.config.font
        self._font_size = font.font_size
        self._spacing = font.spacing * font.font_size
        self.corner_radius = font.corner_radius
        self.chord_tolerance = font.chord_tolerance
        self.dot_size = font.dot_size
        self.round_corners = font.round_corners
        self.feed_speed = self.config.gcode.feed_speed
        self._cursor = Vector2(font.origin_x, font.origin_y)
        self.state = SessionState.UNINITIALIZED

    @property
    def font_size(self) -> float:
        return self._font_size

    @font_size.setter
    def font_size(self, value: float):
        if value <= 0:
            raise ConfigurationError(f"Font size must be positive, got {value}")
        ratio = self.spacing
        top_left = self.top_left
        self._font_size = value
        self._spacing = ratio * value
        self.top_left = top_left

    @property
    def spacing(self) -> float:
        """Gap between characters as a fraction of the font size."""
        return self._spacing / self._font_size

    @spacing.setter
    def spacing(self, ratio: float):
        self._spacing = ratio * self._font_size

    @property
    def spacing_distance(self) -> float:
        return self._spacing

    @property
    def cursor(self) -> Vector2:
        return self._cursor

    @cursor.setter
    def cursor(self, value):
        self._cursor = Vector2.of(value)

    @property
    def top_left(self) -> Vector2:
        """Top of the cap height above the cursor."""
        return self._cursor + UNIT_Y * self._font_size

    @top_left.setter
    def top_left(self, value):
        self._cursor = Vector2.of(value) - UNIT_Y * self._font_size

    @property
    def mapper(self) -> CoordinateMapper:
        return CoordinateMapper(self._cursor, self._font_size)

    def start(self) -> str:
        """Begin the session and return the program preamble."""
        if self.state is SessionState.RENDERING:
            raise SessionStateError("Cannot restart a session while rendering")
        self.state = SessionState.READY
        return self.encoder.preamble(self.feed_speed)

    def finish(self) -> str:
        """Return the program postamble."""
        return self.encoder.postamble()

    def render_motions(self, char: str) -> list:
        """Render one character and advance the cursor past it."""
        if self.state is not SessionState.READY:
            raise SessionStateError(f"Session is {self.state.value}, call start() first")

        glyph = self.glyphs.get(char)
        if glyph is None:
            raise InputError(char)

        turtle = Turtle(self.mapper)
        self.state = SessionState.RENDERING
        try:
            for directive in glyph.program:
                draw = getattr(self, f"_draw_{type(directive).__name__.lower()}")
                draw(directive, turtle)
        finally:
            self.state = SessionState.READY

        self._cursor = self._cursor + UNIT_X * (self.mapper.scale(glyph.width) + self._spacing)
        logger.debug("Rendered %r: %d motions", char, len(turtle.motions))
        return turtle.motions

    def render_character(self, char: str) -> str:
        return self.encoder.encode(self.render_motions(char))

    def render(self, text: str) -> str:
        return "".join(self.render_character(c) for c in text)

    @property
    def _resolution(self) -> tuple[float, float]:
        return self._font_size, self.chord_tolerance

    def _draw_moveto(self, d, turtle: Turtle):
        turtle.jump_to(d.point)

    def _draw_pendown(self, d, turtle: Turtle):
        turtle.pen_down()

    def _draw_penup(self, d, turtle: Turtle):
        turtle.pen_up_cmd()

    def _draw_lineto(self, d, turtle: Turtle):
        turtle.move_to(d.point)

    def _draw_xlineto(self, d, turtle: Turtle):
        turtle.move_x(d.x)

    def _draw_ylineto(self, d, turtle: Turtle):
        turtle.move_y(d.y)

    def _draw_arcto(self, d, turtle: Turtle):
        turtle.trace(arc_steps(turtle.position, d.end, d.radius, d.clockwise, *self._resolution))

    def _draw_circlefrom(self, d, turtle: Turtle):
        turtle.trace(circle_steps(turtle.position, d.center, d.clockwise, *self._resolution))

    def _draw_dot(self, d, turtle: Turtle):
        start = d.center + UNIT_X * self.dot_size
        turtle.jump_to(start)
        turtle.pen_down()
        turtle.trace(circle_steps(start, d.center, True, *self._resolution))
        turtle.pen_up_cmd()

    def _draw_polyline(self, d, turtle: Turtle):
        turtle.trace(polyline(d.points, self.round_corners, self.corner_radius, *self._resolution))

    def _draw_lineintoarc(self, d, turtle: Turtle):
        turtle.trace(line_into_arc(turtle.position, d.center, d.end, d.clockwise, *self._resolution))

    def _draw_arcintoarc(self, d, turtle: Turtle):
        turtle.trace(arc_into_arc(
            turtle.position, d.start_center, d.end, d.end_center,
            d.start_clockwise, d.end_clockwise, *self._resolution,
        ))

    def _draw_arcchain(self, d, turtle: Turtle):
        turtle.trace(arc_chain(turtle.position, d.end, d.curves, *self._resolution))

    def _draw_fillet(self, d, turtle: Turtle):
        arc = round_corner(turtle.position, d.corner, d.after, self.corner_radius)
        turtle.move_to(arc.start)
        if arc.start != arc.end:
            turtle.trace(arc_steps(arc.start, arc.end, arc.radius, arc.clockwise, *self._resolution))
        turtle.move_to(d.after)
