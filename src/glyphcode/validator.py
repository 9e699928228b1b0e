"""Gcode validation against the machine work area."""

import re
from dataclasses import dataclass, field

import numpy as np

from .config import Config


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    corrected_gcode: str | None = None
    stats: dict = field(default_factory=dict)


class GcodeValidator:
    """Validates and corrects generated gcode for machine limits."""

    VALID_COMMANDS = {"G0", "G1", "G17", "G21", "G90"}

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.wa = self.config.work_area
        self.codes = self.config.gcode

    def validate(self, gcode: str, auto_correct: bool = True) -> ValidationResult:
        """Validate gcode and optionally correct issues."""
        lines = gcode.strip().split("\n")
        errors = []
        warnings = []
        corrected_lines = []
        stats = {"lines": len(lines), "moves": 0, "pen_ups": 0, "pen_downs": 0}

        x = y = 0.0
        drawing = False
        drawn = []

        for i, line in enumerate(lines, 1):
            line = line.strip()

            if not line or line.startswith(";"):
                corrected_lines.append(line)
                continue

            corrected, line_errors, line_warnings = self._validate_line(line, i)
            errors.extend(line_errors)
            warnings.extend(line_warnings)
            corrected_lines.append(corrected if auto_correct else line)

            cmd = line.split()[0].upper()
            if cmd == self.codes.engage.upper():
                drawing = True
                stats["pen_downs"] += 1
                drawn.append((x, y))
            elif cmd == self.codes.disengage.upper():
                drawing = False
                stats["pen_ups"] += 1
            elif cmd in ("G0", "G1"):
                stats["moves"] += 1
                x = self._axis(line, "X", x)
                y = self._axis(line, "Y", y)
                if drawing:
                    drawn.append((x, y))

        if drawn:
            points = np.asarray(drawn, dtype=float)
            low, high = points.min(axis=0), points.max(axis=0)
            stats["extent"] = {
                "min_x": float(low[0]),
                "min_y": float(low[1]),
                "max_x": float(high[0]),
                "max_y": float(high[1]),
            }

        corrected_gcode = "\n".join(corrected_lines) if auto_correct else None

        return ValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            corrected_gcode=corrected_gcode,
            stats=stats,
        )

    @staticmethod
    def _axis(line: str, axis: str, current: float) -> float:
        match = re.search(rf"{axis}([-\d.]+)", line, re.IGNORECASE)
        if not match:
            return current
        try:
            return float(match.group(1))
        except ValueError:
            return current

    def _validate_line(self, line: str, line_num: int) -> tuple[str, list[str], list[str]]:
        """Validate a single gcode line."""
        errors = []
        warnings = []
        corrected = line

        cmd = line.split()[0].upper()
        known = self.VALID_COMMANDS | {self.codes.engage.upper(), self.codes.disengage.upper()}
        if cmd not in known:
            warnings.append(f"L{line_num}: Unknown command {cmd}")

        x_match = re.search(r"X([-\d.]+)", line, re.IGNORECASE)
        y_match = re.search(r"Y([-\d.]+)", line, re.IGNORECASE)
        f_match = re.search(r"F([-\d.]+)", line, re.IGNORECASE)

        if x_match:
            try:
                x = float(x_match.group(1))
                if x < self.wa.left or x > self.wa.right:
                    errors.append(
                        f"L{line_num}: X={x:.2f} out of bounds [{self.wa.left}, {self.wa.right}]"
                    )
                    x_clamped = max(self.wa.left, min(self.wa.right, x))
                    corrected = re.sub(
                        r"X[-\d.]+", f"X{x_clamped:.2f}", corrected, flags=re.IGNORECASE
                    )
            except ValueError:
                errors.append(f"L{line_num}: Invalid X value")

        if y_match:
            try:
                y = float(y_match.group(1))
                if y < self.wa.bottom or y > self.wa.top:
                    errors.append(
                        f"L{line_num}: Y={y:.2f} out of bounds [{self.wa.bottom}, {self.wa.top}]"
                    )
                    y_clamped = max(self.wa.bottom, min(self.wa.top, y))
                    corrected = re.sub(
                        r"Y[-\d.]+", f"Y{y_clamped:.2f}", corrected, flags=re.IGNORECASE
                    )
            except ValueError:
                errors.append(f"L{line_num}: Invalid Y value")

        if f_match:
            try:
                f = float(f_match.group(1))
                if f <= 0:
                    errors.append(f"L{line_num}: F={f} invalid (must be > 0)")
                    corrected = re.sub(
                        r"F[-\d.]+", f"F{self.codes.feed_speed:g}", corrected, flags=re.IGNORECASE
                    )
            except ValueError:
                errors.append(f"L{line_num}: Invalid F value")

        return corrected, errors, warnings

    def compile(self, gcode: str) -> str:
        """Validate and return corrected gcode."""
        result = self.validate(gcode, auto_correct=True)
        return result.corrected_gcode or gcode
