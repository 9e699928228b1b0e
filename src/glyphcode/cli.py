"""CLI for glyphcode."""

import logging
from pathlib import Path

import click

from .config import Config


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """glyphcode - Text to single-stroke gcode."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("text")
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--output", "-o", type=Path)
@click.option("--font-size", "-s", type=float)
@click.option("--spacing", type=float, help="Spacing as a fraction of font size")
@click.option("--tolerance", "-t", type=float, help="Arc chord tolerance in machine units")
@click.option("--speed", "-f", type=float, help="Feed speed")
@click.option("--x", "x", type=float, default=0.0, help="Left edge of the first line")
@click.option("--y", "y", type=float, default=0.0, help="Top edge of the first line")
@click.option("--round-corners", is_flag=True)
@click.option("--skip-unknown", is_flag=True, help="Skip characters missing from the font")
@click.option("--home/--no-home", default=True, help="Return home at the end")
def render(
    text: str,
    config_path: Path | None,
    output: Path | None,
    font_size: float | None,
    spacing: float | None,
    tolerance: float | None,
    speed: float | None,
    x: float,
    y: float,
    round_corners: bool,
    skip_unknown: bool,
    home: bool,
):
    """Render TEXT to gcode."""
    from .errors import GlyphcodeError
    from .generator import InstructionGenerator
    from .writer import write_text

    gen = InstructionGenerator(_load_config(config_path))
    if font_size is not None:
        gen.font_size = font_size
    if spacing is not None:
        gen.spacing = spacing
    if tolerance is not None:
        gen.chord_tolerance = tolerance
    if speed is not None:
        gen.feed_speed = speed
    if round_corners:
        gen.round_corners = True
    gen.top_left = (x, y)

    try:
        gcode = gen.start() + write_text(gen, text.replace("\\n", "\n"), skip_unknown)
        if home:
            gcode += gen.finish()
    except GlyphcodeError as e:
        raise click.ClickException(str(e))

    if output:
        output.write_text(gcode)
        click.echo(f"Saved: {output}")
    else:
        click.echo(gcode)


@main.command()
@click.argument("gcode_file", type=Path)
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--fix", is_flag=True)
@click.option("--output", "-o", type=Path)
@click.option("--stats", is_flag=True)
def validate(gcode_file: Path, config_path: Path | None, fix: bool, output: Path | None, stats: bool):
    """Validate gcode for machine limits."""
    from .validator import GcodeValidator

    validator = GcodeValidator(_load_config(config_path))
    result = validator.validate(gcode_file.read_text(), auto_correct=fix)

    if result.errors:
        click.echo(click.style(f"Errors: {len(result.errors)}", fg="red"))
        for e in result.errors[:10]:
            click.echo(f"  {e}")

    if result.warnings:
        click.echo(click.style(f"Warnings: {len(result.warnings)}", fg="yellow"))

    if stats:
        click.echo(f"Stats: {result.stats}")

    if result.valid:
        click.echo(click.style("OK", fg="green"))
    elif fix and output:
        output.write_text(result.corrected_gcode)
        click.echo(f"Fixed → {output}")


@main.command()
@click.option("--output", "-o", "output_dir", required=True, type=Path)
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--chars", help="Characters to render (default: whole font)")
def specimen(output_dir: Path, config_path: Path | None, chars: str | None):
    """Render each glyph into its own gcode file."""
    from .specimen import SpecimenGenerator

    manifest = SpecimenGenerator(_load_config(config_path)).generate(output_dir, chars)
    click.echo(f"Rendered {manifest['stats']['total_rendered']} glyphs")
    if manifest["failed"]:
        click.echo(click.style(f"Failed: {manifest['stats']['total_failed']}", fg="red"))


@main.command()
def glyphs():
    """List available characters."""
    from .glyphs import GLYPHS

    for char, glyph in GLYPHS.items():
        click.echo(f"{char!r}: width {glyph.width:g}")


if __name__ == "__main__":
    main()
