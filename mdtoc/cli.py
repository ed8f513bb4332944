"""CLI entrypoint for mdtoc."""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import ConfigError, MdTocConfig, load_config
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator, TocConfig
from .postproc.toc import BulletStyle

_DESCRIPTION = """\
Generates and writes a table of contents into any Markdown document.

The table of contents is placed after a line holding the begin marker
(default '<!-- toc -->') and closed with the end marker (default
'<!-- tocstop -->'). Running mdtoc again on the same source updates it in
place. Only the begin marker is needed the first time.
"""

_EPILOG = """\
examples:
  add or update a table of contents in a file:
    mdtoc -i README.md

  use mdtoc in a pipeline:
    tool1 --input file.md | mdtoc | tool3 --output file.md

  fail when a table of contents is out of date:
    mdtoc --check README.md
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        metavar="INPUT",
        help="Markdown file to read (defaults to standard input).",
    )
    destination = parser.add_mutually_exclusive_group()
    destination.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="OUTPUT",
        help="Write the result to OUTPUT instead of standard output.",
    )
    destination.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Rewrite INPUT in place.",
    )
    destination.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Write nothing; print a diff and exit 1 when the table of contents is out of date.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[style.value for style in BulletStyle],
        default=None,
        help="List marker style (default: alternating).",
    )
    parser.add_argument(
        "--bullet",
        metavar="SYMBOL",
        help="Use SYMBOL as a literal list marker, overriding --format.",
    )
    parser.add_argument("-b", "--begin-marker", metavar="MARKER", help="Custom begin marker.")
    parser.add_argument("-e", "--end-marker", metavar="MARKER", help="Custom end marker.")
    parser.add_argument(
        "--include-title",
        action="store_true",
        default=None,
        help="List every heading instead of dropping the top-level title.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Path to a .mdtoc.yml file or the directory holding one.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeat for more detail).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Also append log records to PATH.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"mdtoc {__version__}")
    return parser


def _load_settings(args: argparse.Namespace) -> MdTocConfig:
    if args.config is not None:
        settings = load_config(args.config)
    elif args.input is not None:
        settings = load_config(args.input.parent)
    else:
        settings = load_config(Path.cwd())

    if args.format is not None:
        settings.format = BulletStyle(args.format)
        settings.bullet = None
    if args.bullet:
        settings.bullet = args.bullet
    if args.begin_marker:
        settings.begin_marker = args.begin_marker
    if args.end_marker:
        settings.end_marker = args.end_marker
    if args.include_title is not None:
        settings.include_title = args.include_title
    return settings


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """CLI entrypoint for mdtoc."""
    stdin = stdin or sys.stdin
    if stdout is None:
        stdout = sys.stdout
        if isinstance(stdout, io.TextIOWrapper):
            # Write line endings exactly as rendered.
            stdout.reconfigure(newline="")
    stderr = stderr or sys.stderr

    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose, log_file=args.log_file)
    logger = get_logger("cli")
    logger.debug("Parsed cli arguments: %s", args)

    try:
        settings = _load_settings(args)
        orchestrator = Orchestrator(TocConfig.from_settings(settings))
        source = orchestrator.read_source(args.input, stdin)

        if args.check:
            label = str(args.input) if args.input is not None else "<stdin>"
            outcome = orchestrator.check(source, label, stderr)
            if outcome.changed:
                parser.exit(1)
        elif args.output is not None:
            orchestrator.write_file(source, args.output)
        elif args.in_place and args.input is not None:
            logger.debug("Writing in place")
            orchestrator.write_file(source, args.input)
        else:
            orchestrator.write_stream(source, stdout)
            stdout.flush()
    except BrokenPipeError:
        # The consumer of our output hung up; that is a normal way to stop.
        logger.info("Pipe closed, quitting")
        parser.exit(0)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        stderr.write(f"Error: {exc}\n")
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
