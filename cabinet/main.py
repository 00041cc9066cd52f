from __future__ import annotations

import argparse
import logging
import os
import sys

import requests
from dotenv import load_dotenv

from .models import EntryKind
from .utils.copy_ops import copy_directory, copy_file, copy_files_with_suffix
from .utils.file_utils import filename_from_url
from .utils.hashing import file_hash
from .utils.http_client import DEFAULT_TIMEOUT, download_file
from .utils.line_replace import replace_line_in_file
from .utils.probe import describe, probe

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _add_overwrite_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=_env_bool("CABINET_OVERWRITE"),
        help="Replace destination files that already exist",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cabinet", description="Filesystem and download helpers.")
    parser.add_argument(
        "--log-level",
        default=_env_str("CABINET_LOG_LEVEL") or "INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    probe_cmd = commands.add_parser("probe", help="Report whether a path is a file, a directory or absent")
    probe_cmd.add_argument("path")

    copy_file_cmd = commands.add_parser("copy-file", help="Copy one file into a directory")
    copy_file_cmd.add_argument("source")
    copy_file_cmd.add_argument("destination_dir")
    _add_overwrite_flag(copy_file_cmd)

    copy_dir_cmd = commands.add_parser("copy-dir", help="Recursively copy a directory's contents")
    copy_dir_cmd.add_argument("source")
    copy_dir_cmd.add_argument("destination_dir")
    _add_overwrite_flag(copy_dir_cmd)

    copy_suffix_cmd = commands.add_parser("copy-suffix", help="Recursively copy files ending with a suffix")
    copy_suffix_cmd.add_argument("source")
    copy_suffix_cmd.add_argument("destination_dir")
    copy_suffix_cmd.add_argument("suffix")
    _add_overwrite_flag(copy_suffix_cmd)

    download_cmd = commands.add_parser("download", help="Download a URL to a local file")
    download_cmd.add_argument("url")
    download_cmd.add_argument("destination", help="Target file, or a directory to save into")
    download_cmd.add_argument(
        "--timeout",
        type=float,
        default=_env_float("CABINET_TIMEOUT") or DEFAULT_TIMEOUT,
        help="Overall time limit for the download in seconds",
    )

    replace_cmd = commands.add_parser("replace-line", help="Replace the first line containing a substring")
    replace_cmd.add_argument("path")
    replace_cmd.add_argument("match")
    replace_cmd.add_argument("replacement")
    replace_cmd.add_argument("--line-ending", default="\n", help="Line separator used by the file")
    replace_cmd.add_argument("--max-size", type=int, default=None, help="Refuse files larger than this many bytes")

    hash_cmd = commands.add_parser("hash", help="Print the hex digest of a file")
    hash_cmd.add_argument("path")
    hash_cmd.add_argument(
        "--algorithm",
        default=_env_str("CABINET_HASH_ALGORITHM") or "sha256",
        help="hashlib algorithm name",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def run_command(args: argparse.Namespace) -> int:
    if args.command == "probe":
        kind = probe(args.path)
        if kind in (EntryKind.FILE, EntryKind.DIRECTORY):
            info = describe(args.path)
            print(f"{info.kind.value} mode={info.mode:o} size={info.size}")
        else:
            print(kind.value)
        return 0 if kind is not EntryKind.ABSENT else 1

    if args.command == "copy-file":
        destination = copy_file(args.source, args.destination_dir, args.overwrite)
        logging.info("Copied %s -> %s", args.source, destination)
        return 0

    if args.command == "copy-dir":
        copied = copy_directory(args.source, args.destination_dir, args.overwrite)
        logging.info("Copied %s files from %s to %s", len(copied), args.source, args.destination_dir)
        return 0

    if args.command == "copy-suffix":
        copied = copy_files_with_suffix(args.source, args.destination_dir, args.suffix, args.overwrite)
        logging.info("Copied %s '*%s' files from %s to %s", len(copied), args.suffix, args.source, args.destination_dir)
        return 0

    if args.command == "download":
        destination = args.destination
        if os.path.isdir(destination):
            destination = os.path.join(destination, filename_from_url(args.url))
        download_file(args.url, destination, args.timeout)
        logging.info("Saved %s", destination)
        return 0

    if args.command == "replace-line":
        replaced = replace_line_in_file(args.path, args.match, args.replacement, args.line_ending, args.max_size)
        logging.info("%s %s", "Updated" if replaced else "Left unchanged", args.path)
        return 0

    if args.command == "hash":
        print(file_hash(args.path, args.algorithm))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return run_command(args)
    except (OSError, requests.RequestException, ValueError) as exc:
        logging.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
