from __future__ import annotations

import argparse
import logging
from pathlib import Path

from indoormap.core.errors import MalformedContentError, SourceUnavailableError
from indoormap.services.map_service import MapService, UnknownExporterError


def _cmd_summary(args: argparse.Namespace) -> int:
    service = MapService()
    indoor_map = service.load_map(Path(args.file).expanduser())

    print(f"Map {indoor_map.width:g} x {indoor_map.depth:g}")
    print(f"  Correspondences: {len(indoor_map.earth_registration.correspondences)}")
    for floor in indoor_map.floors:
        print(
            f"  Floor '{floor.name}' at {floor.at_height:g}m:"
            f" {len(floor.walls)} wall(s),"
            f" {len(floor.outline.polygons)} polygon(s),"
            f" {len(floor.access_points)} AP(s),"
            f" {len(floor.beacons)} beacon(s),"
            f" {len(floor.groundtruth_points)} GT point(s)"
        )
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    service = MapService()
    try:
        content, _ = service.export_file(Path(args.file).expanduser(), args.exporter)
    except UnknownExporterError:
        known = ", ".join(e["id"] for e in service.list_exporters())
        print(f"[ERROR] Unknown exporter '{args.exporter}' (available: {known})")
        return 2

    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    print(f"Saved: {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="indoormap")
    p.add_argument("-v", "--verbose", action="store_true", help="Log parser details")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("summary", help="Print floors and their content.")
    s.add_argument("file", help="Path to map XML file")
    s.set_defaults(func=_cmd_summary)

    e = sub.add_parser("export", help="Export a map file, e.g. as SVG.")
    e.add_argument("file", help="Path to map XML file")
    e.add_argument("--exporter", default="svg", help="Exporter id (default: svg)")
    e.add_argument("--out", default="map.svg", help="Output path (default: map.svg)")
    e.set_defaults(func=_cmd_export)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.func(args))
    except SourceUnavailableError as exc:
        print(f"[ERROR] {exc.message}")
        return 2
    except MalformedContentError as exc:
        print(f"[ERROR] {exc.message}")
        return 3


if __name__ == "__main__":
    raise SystemExit(main())
