from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from chartscene import ChartDefaults, load_plot
from chartscene.scene_io import scene_schema


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="chartscene")
    parser.add_argument("--verbose", action="store_true", help="Log scene parsing and encoding at DEBUG level.")
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="Print the chart service URI for a scene JSON file.")
    encode.add_argument("scene", type=Path)
    encode.add_argument("--img", action="store_true", help="Print IMG tag attributes instead of the bare URI.")
    encode.add_argument(
        "--service-url",
        default=None,
        help="Chart service endpoint. Default: $CHARTSCENE_SERVICE_URL or the Google Chart service.",
    )

    sub.add_parser("schema", help="Print the scene JSON schema.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "encode":
        defaults = ChartDefaults.from_env()
        if args.service_url:
            defaults = ChartDefaults(service_url=args.service_url, validate_colors=defaults.validate_colors)
        plot = load_plot(args.scene, defaults=defaults)
        print(plot.generate_img_uri() if args.img else plot.generate_uri())
        return

    if args.command == "schema":
        print(json.dumps(scene_schema(), indent=2, sort_keys=True))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
