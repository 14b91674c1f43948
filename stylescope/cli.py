"""CLI entry point for stylescope.

Usage:
    stylescope string <snapshot>                     Print the composite string
    stylescope chunks <snapshot>                     List chunks with their ranges
    stylescope trait <snapshot> <trait> [-r 3:7]     Resolve a trait over a range
    stylescope font <snapshot> <property>            Resolve a font property
"""

from __future__ import annotations

import logging

import click

from . import __version__
from .errors import InspectionError, SnapshotError

TRAITS = (
    "bold",
    "italic",
    "font-weight",
    "font",
    "foreground-color",
    "strikethrough",
    "strikethrough-color",
    "underline",
    "underline-color",
    "kerning",
    "tracking",
    "baseline-offset",
)

FONT_PROPERTIES = ("size", "name", "weight", "design", "style", "fixed-size")


def _attributes(snapshot: str):
    from .attributes import TextAttributes
    from .snapshot import load_snapshot

    try:
        return TextAttributes.extract(load_snapshot(snapshot))
    except (SnapshotError, InspectionError) as e:
        raise click.ClickException(str(e)) from None


def _parse_range(text: str) -> slice:
    start, sep, stop = text.partition(":")
    if not sep:
        raise click.BadParameter(f"expected START:STOP, got {text!r}", param_hint="--range")
    try:
        return slice(int(start) if start else None, int(stop) if stop else None)
    except ValueError:
        raise click.BadParameter(f"bounds must be integers: {text!r}", param_hint="--range")


def _format(value) -> str:
    from .nodes import Color

    if isinstance(value, Color):
        return value.hex()
    if hasattr(value, "value") and isinstance(value.value, str):
        return value.value
    if value is None:
        return "none"
    return str(value)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Inspect the effective styling of text snapshots."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s %(levelname)s: %(message)s",
    )


@main.command()
@click.argument("snapshot", type=click.Path(exists=True))
def string(snapshot: str) -> None:
    """Print the full string of a text snapshot."""
    click.echo(_attributes(snapshot).string)


@main.command()
@click.argument("snapshot", type=click.Path(exists=True))
def chunks(snapshot: str) -> None:
    """List the chunks of a text snapshot with their offsets and modifiers."""
    from .navigator import type_tag

    attrs = _attributes(snapshot)
    click.echo(f"{len(attrs.chunks)} chunks, {len(attrs)} characters")
    for span, pos, chunk in zip(attrs.chunk_ranges, attrs.chunk_string_ranges, attrs.chunks):
        kinds = []
        for m in chunk.modifiers:
            tag = type_tag(m)
            child = getattr(m, "any_text_modifier", None)
            if child is not None:
                tag = type_tag(child)
            kinds.append(tag.value if tag else type(m).__name__)
        click.echo(
            f"  [{span.start:4d}:{span.stop:<4d}] bytes {pos.start}:{pos.stop}"
            f"  {chunk.text!r}  {', '.join(kinds) or '-'}"
        )


@main.command()
@click.argument("snapshot", type=click.Path(exists=True))
@click.argument("trait", type=click.Choice(TRAITS))
@click.option("-r", "--range", "range_", default=None, help="Character range START:STOP")
def trait(snapshot: str, trait: str, range_: str | None) -> None:
    """Resolve TRAIT across the whole text, or across --range."""
    attrs = _attributes(snapshot)
    if range_ is not None:
        attrs = attrs[_parse_range(range_)]

    query = {
        "bold": attrs.is_bold,
        "italic": attrs.is_italic,
        "font-weight": attrs.font_weight,
        "font": attrs.font,
        "foreground-color": attrs.foreground_color,
        "strikethrough": attrs.is_strikethrough,
        "strikethrough-color": attrs.strikethrough_color,
        "underline": attrs.is_underline,
        "underline-color": attrs.underline_color,
        "kerning": attrs.kerning,
        "tracking": attrs.tracking,
        "baseline-offset": attrs.baseline_offset,
    }[trait]
    try:
        click.echo(_format(query()))
    except InspectionError as e:
        raise click.ClickException(str(e)) from None


@main.command()
@click.argument("snapshot", type=click.Path(exists=True))
@click.argument("prop", metavar="PROPERTY", type=click.Choice(FONT_PROPERTIES))
def font(snapshot: str, prop: str) -> None:
    """Resolve a property of the font applied to the text."""
    from . import fonts

    attrs = _attributes(snapshot)
    try:
        f = attrs.font()
        if prop == "fixed-size":
            click.echo(str(fonts.is_fixed_size(f)).lower())
            return
        lookup = {
            "size": fonts.font_size,
            "name": fonts.font_name,
            "weight": fonts.font_weight,
            "design": fonts.font_design,
            "style": fonts.font_style,
        }[prop]
        click.echo(_format(lookup(f)))
    except InspectionError as e:
        raise click.ClickException(str(e)) from None


if __name__ == "__main__":
    main()
