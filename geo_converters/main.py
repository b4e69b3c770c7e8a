"""
Geo converters command line.

Reads JSON from a file or stdin, converts it and prints the result as JSON.
"""

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from geo_converters import __version__
from geo_converters.config import settings
from geo_converters.convert import (
    decode_box,
    decode_circle,
    decode_geojson,
    decode_point,
    decode_polygon,
    decode_sphere,
    encode_box,
    encode_circle,
    encode_geo_command,
    encode_geojson,
    encode_point,
    encode_polygon,
    encode_sphere,
)
from geo_converters.errors import GeoConversionError
from geo_converters.models import Box, Circle, GeoCommand, Point, Polygon, Sphere

logger = logging.getLogger("geo_converters")

SHAPES = {
    "point": Point,
    "box": Box,
    "circle": Circle,
    "sphere": Sphere,
    "polygon": Polygon,
}

ENCODERS = {
    "point": encode_point,
    "box": encode_box,
    "circle": encode_circle,
    "sphere": encode_sphere,
    "polygon": encode_polygon,
}

DECODERS = {
    "point": decode_point,
    "box": decode_box,
    "circle": decode_circle,
    "sphere": decode_sphere,
    "polygon": decode_polygon,
    "geojson": decode_geojson,
}


def _read_json(path: str | None) -> Any:
    if path is None or path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _decode(args: argparse.Namespace) -> Any:
    shape = DECODERS[args.kind](_read_json(args.file))
    return None if shape is None else shape.model_dump(mode="json")


def _encode(args: argparse.Namespace) -> Any:
    shape = SHAPES[args.kind].model_validate(_read_json(args.file))
    if args.geojson:
        return encode_geojson(shape)
    return ENCODERS[args.kind](shape)


def _command(args: argparse.Namespace) -> Any:
    shape = SHAPES[args.kind].model_validate(_read_json(args.file))
    strict = False if args.lenient else None
    return encode_geo_command(GeoCommand(command=args.name, shape=shape), strict=strict)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geo-converters",
        description="Convert geo shapes to and from documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="action", required=True)

    decode = commands.add_parser("decode", help="Read a shape from a document")
    decode.add_argument("kind", choices=sorted(DECODERS))
    decode.add_argument("file", nargs="?", help="JSON document (default: stdin)")
    decode.set_defaults(handler=_decode)

    encode = commands.add_parser("encode", help="Write a shape as a document")
    encode.add_argument("kind", choices=sorted(ENCODERS))
    encode.add_argument("file", nargs="?", help="JSON shape (default: stdin)")
    encode.add_argument(
        "--geojson",
        action="store_true",
        help="Write the GeoJSON dialect instead of the legacy one",
    )
    encode.set_defaults(handler=_encode)

    command = commands.add_parser("command", help="Write a geo query command")
    command.add_argument("name", help="Command name, e.g. $geoWithin")
    command.add_argument("kind", choices=sorted(SHAPES))
    command.add_argument("file", nargs="?", help="JSON shape (default: stdin)")
    command.add_argument(
        "--lenient",
        action="store_true",
        help="Write an empty argument list for unsupported shapes",
    )
    command.set_defaults(handler=_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = args.handler(args)
    except (GeoConversionError, ValidationError, json.JSONDecodeError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


def run():
    """Run the command line tool."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
