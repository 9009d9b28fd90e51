#!/usr/bin/env python3
"""Dot halftone CLI: turns an image into an SVG of colored dots."""

import logging
import sys
from pathlib import Path

import click

from visual.dotscreen import (
    DotParams,
    ImageLoadError,
    LumaWeighting,
    SizingPolicy,
    all_sizing_names,
    all_weighting_names,
    default_output_path,
    parse_sizing_name,
    parse_weighting_name,
    process_file,
)


@click.command()
@click.argument('input', type=click.Path(dir_okay=False))
@click.option('-o', '--output', type=click.Path(dir_okay=False), help='Output file (default: input with .svg extension)')
@click.option('-b', '--box-size', type=int, default=50, show_default=True, help='Box size for dots')
@click.option('-s', '--scale', type=int, default=1, show_default=True,
              help='Scale of the SVG compared to the original image')
@click.option('-t', '--threshold', type=float, default=1.0, show_default=True,
              help="Luma threshold, don't draw dots at or above this value (0.0 to 1.0)")
@click.option('-c/-m', '--color/--mono', default=True, show_default=True,
              help='Use average color for each dot rather than black')
@click.option('-l', '--bt709', is_flag=True, help='Use BT.709 instead of BT.601 for luma')
@click.option('-a', '--area', is_flag=True, help='Use the luma as the surface area instead of the radius')
@click.option('--weighting', type=click.Choice(all_weighting_names()), help='Luma weighting (overrides -l)')
@click.option('--sizing', type=click.Choice(all_sizing_names()), help='Dot sizing (overrides -a)')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
def main(input, output, box_size, scale, threshold, color, bt709, area, weighting, sizing, verbose):
    """Turn INPUT (JPEG, PNG or GIF) into dots sized by luma."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    if weighting:
        weighting_type = parse_weighting_name(weighting)
    else:
        weighting_type = LumaWeighting.BT709 if bt709 else LumaWeighting.BT601

    if sizing:
        sizing_type = parse_sizing_name(sizing)
    else:
        sizing_type = SizingPolicy.AREA if area else SizingPolicy.LINEAR

    try:
        params = DotParams(
            box_size=box_size,
            scale=scale,
            luma_threshold=threshold,
            color=color,
            weighting=weighting_type,
            sizing=sizing_type,
        )
    except ValueError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    output_path = Path(output) if output else default_output_path(input)

    try:
        count = process_file(input, output_path, params)
    except ImageLoadError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error writing {output_path}: {e}", err=True)
        sys.exit(1)

    click.echo(f"Saved: {output_path} ({count} dots)")


if __name__ == '__main__':
    main()
