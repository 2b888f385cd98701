"""
Command-line interface for bezierflat.

Flattens curves saved as JSON and writes default configuration files.
"""

import argparse
import os
import sys

from bezierflat.config import load_config, save_default_config
from bezierflat.tracer import configure_from_config, configure_tracer, get_tracer


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="bezierflat: flatten Bezier curves into polygons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    flatten_parser = subparsers.add_parser("flatten", help="Flatten a curve JSON file")
    flatten_parser.add_argument(
        "--curve",
        required=True,
        help="Curve description (vertices + closed flag) as JSON",
    )
    flatten_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    flatten_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    flatten_parser.add_argument(
        "--svg",
        action="store_true",
        help="Also write an SVG preview",
    )
    flatten_parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    flatten_parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    flatten_parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="bezierflat_config.yaml",
        help="Output path for config file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "flatten":
        return handle_flatten(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def handle_flatten(args):
    """Handle the flatten command."""
    tracer = get_tracer()

    try:
        config = load_config(args.config)

        if args.trace:
            configure_tracer(enabled=True, level=args.trace_level, file_path=args.trace_file)
        else:
            configure_from_config(config.tracing)

        from bezierflat.curves.bezier import BezierCurve
        from bezierflat.export.svg_preview import create_preview_svg
        from bezierflat.io.save_artifacts import load_curve_data, save_json, save_svg

        with tracer.span("cli_flatten", module="cli"):
            curve = BezierCurve.from_data(load_curve_data(args.curve))
            polygon = curve.polygon(config)

            save_json(polygon, os.path.join(args.out, "polygon.json"))
            if args.svg:
                dwg = create_preview_svg([polygon], [curve], config.preview)
                save_svg(dwg, os.path.join(args.out, "preview.svg"))

        print(f"\nCurve flattened successfully.")
        print(f"  Vertices: {len(curve)} ({'closed' if curve.closed else 'open'})")
        print(f"  Polygon points: {len(polygon)}")
        if len(polygon) >= 2:
            print(f"  Polyline length: {polygon.to_shapely().length:.3f}")
        print(f"\nOutputs saved to: {args.out}/")
        print(f"  - polygon.json")
        if args.svg:
            print(f"  - preview.svg")

        return 0

    except Exception as e:
        tracer.event(f"Flatten failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1

    finally:
        tracer.config.close()


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
