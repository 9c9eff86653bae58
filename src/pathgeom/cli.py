"""
Command-line interface for pathgeom.

Provides commands for inspecting, transforming, generating and exporting
SVG path data.
"""

import argparse
import math
import sys

from pathgeom.config import load_config, save_default_config
from pathgeom.errors import InvalidPathSyntax
from pathgeom.geometry.path import Path
from pathgeom.geometry.point import Point
from pathgeom.geometry.rectangle import Rectangle
from pathgeom.svg.document import build_svg_document, save_svg_document
from pathgeom.tracer import configure_tracer, get_tracer


def _add_common(parser):
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default=None,
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pathgeom",
        description="pathgeom: bounds, transforms and shapes for SVG path data",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    bounds_parser = subparsers.add_parser("bounds", help="Print the bound rect of a path")
    bounds_parser.add_argument("d", help="SVG path data")
    bounds_parser.add_argument(
        "--tight",
        action="store_true",
        help="Bound the sampled curve instead of the conservative hull",
    )
    _add_common(bounds_parser)

    transform_parser = subparsers.add_parser("transform", help="Transform a path and print it")
    transform_parser.add_argument("d", help="SVG path data")
    transform_parser.add_argument("--move", nargs=2, type=float, metavar=("DX", "DY"))
    transform_parser.add_argument("--rotate", type=float, metavar="DEG",
                                  help="Rotate around the path center")
    transform_parser.add_argument("--scale", nargs=2, type=float, metavar=("SX", "SY"),
                                  help="Scale from the path center")
    transform_parser.add_argument("--mirror", choices=["horiz", "vert"])
    transform_parser.add_argument("--fit", nargs=4, type=float, metavar=("X1", "Y1", "X2", "Y2"),
                                  help="Fit into a rectangle; swapped corners mirror")
    _add_common(transform_parser)

    shape_parser = subparsers.add_parser("shape", help="Generate a shape and print it")
    shape_sub = shape_parser.add_subparsers(dest="shape")
    ellipse_parser = shape_sub.add_parser("ellipse")
    ellipse_parser.add_argument("cx", type=float)
    ellipse_parser.add_argument("cy", type=float)
    ellipse_parser.add_argument("r1", type=float)
    ellipse_parser.add_argument("r2", type=float)
    _add_common(ellipse_parser)
    star_parser = shape_sub.add_parser("star")
    star_parser.add_argument("cx", type=float)
    star_parser.add_argument("cy", type=float)
    star_parser.add_argument("r1", type=float)
    star_parser.add_argument("r2", type=float)
    star_parser.add_argument("vertices", type=int)
    star_parser.add_argument("--offset", type=float, default=0.0, help="Inner angle offset in degrees")
    _add_common(star_parser)

    export_parser = subparsers.add_parser("export", help="Write paths into an SVG document")
    export_parser.add_argument("d", nargs="+", help="SVG path data, one per path")
    export_parser.add_argument("--out", "-o", required=True, help="Output SVG file")
    _add_common(export_parser)

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="pathgeom_config.yaml",
        help="Output path for config file",
    )

    return parser, shape_parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser, shape_parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "init-config":
        save_default_config(args.out)
        print(f"Default configuration saved to: {args.out}")
        return 0

    if args.command == "shape" and args.shape is None:
        shape_parser.print_help()
        return 0

    config = load_config(args.config)
    configure_tracer(
        enabled=args.trace or config.tracing.enabled,
        level=args.trace_level or config.tracing.level,
        file_path=config.tracing.file_path,
        json_output=config.tracing.json_output,
    )

    handlers = {
        "bounds": handle_bounds,
        "transform": handle_transform,
        "shape": handle_shape,
        "export": handle_export,
    }

    tracer = get_tracer()
    try:
        with tracer.span(f"cli_{args.command}", module="cli"):
            return handlers[args.command](args, config)
    except InvalidPathSyntax as e:
        tracer.event(f"Invalid path data: {e}", level="ERROR")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _format_rect(rect):
    return f"{rect.from_.x:g} {rect.from_.y:g} {rect.to.x:g} {rect.to.y:g}"


def handle_bounds(args, config):
    """Handle the bounds command."""
    path = Path.from_svg(args.d)
    if not path.points:
        print("Error: path is empty", file=sys.stderr)
        return 1

    if args.tight:
        rect = path.get_tight_bound_rect(config.flatten.steps)
    else:
        rect = path.get_bound_rect()
    print(_format_rect(rect))
    return 0


def handle_transform(args, config):
    """Handle the transform command; operations apply in option order below."""
    path = Path.from_svg(args.d)
    if not path.points:
        print("")
        return 0

    if args.move:
        path.move(*args.move)
    if args.rotate is not None:
        path.rotate(math.radians(args.rotate), path.get_center())
    if args.scale:
        path.scale(args.scale[0], args.scale[1], path.get_center())
    if args.mirror:
        path.mirror(args.mirror)
    if args.fit:
        x1, y1, x2, y2 = args.fit
        path.place_into_rect(Rectangle(Point(x1, y1), Point(x2, y2)))

    print(path.svg(precision=config.codec.precision))
    return 0


def handle_shape(args, config):
    """Handle the shape command."""
    center = Point(args.cx, args.cy)
    if args.shape == "ellipse":
        path = Path().ellipse(center, args.r1, args.r2)
    else:
        path = Path().star(center, args.r1, args.r2, args.vertices, math.radians(args.offset))

    print(path.svg(precision=config.codec.precision))
    return 0


def handle_export(args, config):
    """Handle the export command."""
    paths = [Path.from_svg(d) for d in args.d]
    dwg = build_svg_document(paths, config=config.document, precision=config.codec.precision)
    save_svg_document(dwg, args.out)
    print(f"SVG document saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
