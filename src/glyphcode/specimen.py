"""Specimen export: one gcode file per glyph."""

import json
import logging
from pathlib import Path

from tqdm import tqdm

from .config import Config
from .errors import GlyphcodeError
from .generator import InstructionGenerator
from .glyphs import GLYPHS
from .turtle import extent

logger = logging.getLogger(__name__)


class SpecimenGenerator:
    """Renders every glyph of a table into its own gcode file."""

    def __init__(self, config: Config | None = None, glyphs: dict | None = None):
        self.config = config or Config()
        self.glyphs = GLYPHS if glyphs is None else glyphs

    def generate(self, output_dir: Path, characters: str | None = None) -> dict:
        """Write `<codepoint>.gcode` per glyph plus a manifest.json."""
        output_dir.mkdir(parents=True, exist_ok=True)
        chars = list(characters) if characters else list(self.glyphs)

        manifest = {"glyphs": [], "failed": [], "stats": {}}

        for char in tqdm(chars, desc="Rendering"):
            out_path = output_dir / f"U+{ord(char):04X}.gcode"
            session = InstructionGenerator(self.config, self.glyphs)
            try:
                preamble = session.start()
                motions = session.render_motions(char)
                gcode = preamble + session.encoder.encode(motions) + session.finish()
            except GlyphcodeError as e:
                manifest["failed"].append({"char": char, "error": str(e)})
                continue

            out_path.write_text(gcode)
            box = extent(motions)
            manifest["glyphs"].append({
                "char": char,
                "gcode": str(out_path),
                "motions": len(motions),
                "extent": box.tolist() if box is not None else None,
            })

        manifest["stats"]["total_rendered"] = len(manifest["glyphs"])
        manifest["stats"]["total_failed"] = len(manifest["failed"])
        logger.info(
            "Rendered %d glyphs, %d failed",
            manifest["stats"]["total_rendered"],
            manifest["stats"]["total_failed"],
        )

        with open(output_dir / "manifest.json", "w") as f:
            json.dump(manifest, f, indent=2, ensure_ascii=False)

        return manifest
