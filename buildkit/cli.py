"""
Command line tools for GRP archives and BUILD maps.

Usage:
    python -m buildkit grp list [GRP]
    python -m buildkit grp info [GRP]
    python -m buildkit grp extract GRP NAME [--output OUT]
    python -m buildkit map info PATH [--grp GRP]
    python -m buildkit map new OUT
"""

from __future__ import annotations

import argparse
from pathlib import Path

from buildkit.const import DEFAULT_GRP_PATH
from buildkit.errors import DecodeError
from buildkit.grp import GrpArchive
from buildkit.grp_analyzer import analyze_grp, format_bytes
from buildkit.log import log
from buildkit.model.build_map import BuildMap
from buildkit.model.factory import new_square_map


def _load_grp(path: Path) -> GrpArchive | None:
    if not path.exists():
        log.error(f'GRP file not found: {path}')
        return None
    return GrpArchive.load(path)


def grp_list(args: argparse.Namespace) -> int:
    archive = _load_grp(args.grp)
    if archive is None:
        return 1

    log.info(f'{args.grp}: {len(archive)} entries')
    for entry in archive:
        log.info(f'  {entry.name:<12} offset={entry.offset:<10} size={entry.size}')
    return 0


def grp_info(args: argparse.Namespace) -> int:
    archive = _load_grp(args.grp)
    if archive is None:
        return 1

    info = analyze_grp(archive, args.grp.name)
    log.info(f'File: {info.filename}')
    log.info(f'Signature: {info.signature}')
    log.info(f'Game: {info.known_game or "unknown"}')
    log.info(f'Files: {info.total_files} ({format_bytes(info.total_size)})')
    log.info(f'  Maps: {info.map_count}')
    log.info(f'  Art: {info.art_count}')
    log.info(f'  Sound: {info.sound_count}')
    log.info(f'  Music: {info.music_count}')
    log.info(f'  Other: {info.other_count}')
    if info.common_files:
        log.info(f'Common files: {", ".join(info.common_files)}')
    return 0


def grp_extract(args: argparse.Namespace) -> int:
    archive = _load_grp(args.grp)
    if archive is None:
        return 1

    entry = archive.get(args.name)
    if entry is None:
        log.error(f'Entry not found: {args.name}')
        return 1

    output = args.output
    if output is None:
        # Entry names come from the archive; keep only the final component
        filename = Path(entry.name).name
        if not filename:
            log.error(f'Entry name {entry.name!r} is not a usable filename, pass --output')
            return 1
        output = Path(filename)
    output.write_bytes(archive.slice(entry))
    log.info(f'Wrote {entry.name} ({format_bytes(entry.size)}) to {output}')
    return 0


def map_info(args: argparse.Namespace) -> int:
    if args.grp is not None:
        archive = _load_grp(args.grp)
        if archive is None:
            return 1
        entry = archive.get(args.path)
        if entry is None:
            log.error(f'Map not found in {args.grp}: {args.path}')
            return 1
        build_map = archive.load_map(entry)
    else:
        path = Path(args.path)
        if not path.exists():
            log.error(f'Map file not found: {path}')
            return 1
        build_map = BuildMap.load(path)

    start = build_map.start
    log.info(f'Version: {build_map.version}')
    log.info(f'Start: x={start.posx} y={start.posy} z={start.posz} ang={start.ang} sector={start.cursectnum}')
    log.info(f'Sectors: {len(build_map.sectors)}')
    log.info(f'Walls: {len(build_map.walls)}')
    log.info(f'Sprites: {len(build_map.sprites)}')
    return 0


def map_new(args: argparse.Namespace) -> int:
    build_map = new_square_map()
    build_map.save(args.output)
    log.info(f'Wrote new map ({build_map.encoded_size} bytes) to {args.output}')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='buildkit', description='Inspect BUILD engine GRP archives and maps')
    commands = parser.add_subparsers(dest='command', required=True)

    grp = commands.add_parser('grp', help='GRP archive tools').add_subparsers(dest='action', required=True)

    grp_list_parser = grp.add_parser('list', help='List archive entries')
    grp_list_parser.add_argument('grp', nargs='?', type=Path, default=DEFAULT_GRP_PATH, help=f'GRP file (default: {DEFAULT_GRP_PATH})')
    grp_list_parser.set_defaults(func=grp_list)

    grp_info_parser = grp.add_parser('info', help='Summarize archive contents')
    grp_info_parser.add_argument('grp', nargs='?', type=Path, default=DEFAULT_GRP_PATH, help=f'GRP file (default: {DEFAULT_GRP_PATH})')
    grp_info_parser.set_defaults(func=grp_info)

    grp_extract_parser = grp.add_parser('extract', help='Write one entry to disk')
    grp_extract_parser.add_argument('grp', type=Path, help='GRP file')
    grp_extract_parser.add_argument('name', help='Entry name (case-insensitive)')
    grp_extract_parser.add_argument('--output', '-o', type=Path, help='Output file (default: entry name)')
    grp_extract_parser.set_defaults(func=grp_extract)

    map_ = commands.add_parser('map', help='BUILD map tools').add_subparsers(dest='action', required=True)

    map_info_parser = map_.add_parser('info', help='Show map header and table counts')
    map_info_parser.add_argument('path', help='Map file, or entry name when --grp is given')
    map_info_parser.add_argument('--grp', '-g', type=Path, help='Read the map from this GRP archive')
    map_info_parser.set_defaults(func=map_info)

    map_new_parser = map_.add_parser('new', help='Write a new single-sector map')
    map_new_parser.add_argument('output', type=Path, help='Output map file')
    map_new_parser.set_defaults(func=map_new)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except DecodeError as e:
        log.error(f'Failed to decode: {e}')
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
