"""Multi-line text layout on top of an InstructionGenerator session."""

import logging

from .errors import InputError
from .generator import InstructionGenerator
from .vector import Vector2

logger = logging.getLogger(__name__)

# descenders reach half a font size below the baseline
LINE_HEIGHT = 1.5


def line_advance(generator: InstructionGenerator) -> float:
    """Vertical distance between consecutive baselines."""
    return LINE_HEIGHT * generator.font_size + generator.spacing_distance


def write_text(generator: InstructionGenerator, text: str, skip_unknown: bool = False) -> str:
    """Render `text`, breaking lines on newlines.

    A carriage return moves back to the left margin; a newline also drops to the
    next line, so "\\r\\n" and "\\n" both produce a single line break.
    """
    left = generator.cursor.x
    chunks = []
    skipped = []

    for char in text:
        if char == "\r":
            generator.cursor = Vector2(left, generator.cursor.y)
        elif char == "\n":
            generator.cursor = Vector2(left, generator.cursor.y - line_advance(generator))
        else:
            try:
                chunks.append(generator.render_character(char))
            except InputError:
                if not skip_unknown:
                    raise
                skipped.append(char)
                logger.warning("Skipping unsupported character %r", char)

    logger.info("Wrote %d characters, skipped %d", len(text) - len(skipped), len(skipped))
    return "".join(chunks)
