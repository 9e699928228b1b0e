"""GCode encoding of turtle motions."""

from .config import GcodeConfig
from .turtle import Feed, PenDown, PenUp, Rapid


class GcodeEncoder:
    """Encodes motions as gcode lines."""

    def __init__(self, config: GcodeConfig | None = None):
        self.config = config or GcodeConfig()

    def number(self, value: float) -> str:
        text = f"{value:.{self.config.precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return text

    def preamble(self, feed_speed: float | None = None) -> str:
        speed = self.number(feed_speed if feed_speed is not None else self.config.feed_speed)
        return "\n".join(["G90", "G17", "G21", f"G1 F{speed}"])

    def postamble(self) -> str:
        return "\nG0 X0 Y0"

    def encode_motion(self, motion) -> str:
        if isinstance(motion, Rapid):
            return f"G0 X{self.number(motion.x)} Y{self.number(motion.y)}"
        if isinstance(motion, Feed):
            axes = []
            if motion.x is not None:
                axes.append(f"X{self.number(motion.x)}")
            if motion.y is not None:
                axes.append(f"Y{self.number(motion.y)}")
            return " ".join(["G1", *axes])
        if isinstance(motion, PenDown):
            return self.config.engage
        if isinstance(motion, PenUp):
            return self.config.disengage
        raise TypeError(f"Unknown motion: {motion!r}")

    def encode(self, motions) -> str:
        """Encode motions; each line is prefixed with a newline so chunks concatenate."""
        return "".join(f"\n{self.encode_motion(m)}" for m in motions)
