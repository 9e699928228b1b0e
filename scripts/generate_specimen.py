"""Render a specimen of every glyph in the default font."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from glyphcode.config import Config
from glyphcode.specimen import SpecimenGenerator


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-o", "--output", type=Path, default=Path("data/specimen"))
    parser.add_argument("-c", "--config", type=Path, help="JSON config file")
    parser.add_argument("--chars", help="Characters to render")
    args = parser.parse_args()

    config = Config.load(args.config) if args.config else Config()
    manifest = SpecimenGenerator(config).generate(args.output, args.chars)

    print(f"Done: {manifest['stats']['total_rendered']} glyphs, {manifest['stats']['total_failed']} failed")
    for failure in manifest["failed"]:
        print(f"  {failure['char']!r}: {failure['error']}")
    print(f"Manifest: {args.output / 'manifest.json'}")


if __name__ == "__main__":
    main()
