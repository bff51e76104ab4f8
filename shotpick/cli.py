"""Command-line front door for shotpick.

Parses CLI options, merges them over the persisted config, builds the
candidate source and either prints filtered matches (``--filter``) or runs
the interactive picker. The final query is printed to stdout on exit.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .candidates import CandidateSource, CandidateSourceError, LineFileCandidateSource, StaticCandidateSource
from .config import PickerConfig, load_picker_config, normalize_log_level
from .filtering import filter_candidates
from .logs import configure_logging
from .picker import RefetchPolicy
from .runtime import run_picker
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shotpick",
        description="Pick a project name from a live-filtered list in the terminal.",
    )
    parser.add_argument(
        "--candidates",
        metavar="PATH",
        default=None,
        help="Text file with one candidate per line (default: built-in project list).",
    )
    parser.add_argument(
        "--refetch",
        choices=[policy.value for policy in RefetchPolicy],
        default=None,
        help="When to re-read candidates: on every query change, or only when the query is cleared.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--quit-key",
        action="append",
        default=None,
        metavar="TOKEN",
        help="Key token that quits the picker (repeatable; default: ESC and CTRL_C).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO or $SHOTPICK_LOG).")
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        default=None,
        help="Write logs to PATH instead of stderr; stderr logging is paused while the picker is on screen.",
    )
    parser.add_argument(
        "--filter",
        metavar="QUERY",
        default=None,
        help="Print candidates containing QUERY, one per line, and exit.",
    )
    return parser


def build_source(path: Path | None) -> CandidateSource:
    if path is None:
        return StaticCandidateSource()
    return LineFileCandidateSource(path)


def print_matches(source: CandidateSource, query: str) -> None:
    for item in filter_candidates(query, source.get_candidates()):
        sys.stdout.write(item + "\n")


def main(argv: list[str] | None = None, config: PickerConfig | None = None) -> None:
    """Parse CLI arguments and run the picker or the one-shot filter.

    ``config`` is primarily for tests; when omitted it is loaded from disk.
    """
    args = build_parser().parse_args(argv)
    if config is None:
        config = load_picker_config()

    log_level = normalize_log_level(args.log_level) if args.log_level else config.log_level
    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(log_level, log_file, no_color=args.no_color)

    candidates_path = Path(args.candidates) if args.candidates else config.candidates_file
    source = build_source(candidates_path)

    query = args.filter
    if query is None and not os.isatty(sys.stdin.fileno()):
        query = ""

    try:
        if query is not None:
            print_matches(source, query)
            return
        result = run_picker(
            source,
            refetch_policy=args.refetch or config.refetch_policy,
            quit_keys=tuple(args.quit_key) if args.quit_key else config.quit_keys,
            theme_name=args.theme or config.theme,
            no_color=args.no_color,
        )
    except CandidateSourceError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc
    except OSError as exc:
        logger.error("cannot open terminal: %s", exc)
        raise SystemExit(f"cannot open terminal: {exc}") from exc

    sys.stdout.write(result + "\n")


if __name__ == "__main__":
    main()
