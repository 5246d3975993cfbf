"""Command-line entry point.

Asks the question sequence, then writes the community health files under the
destination root.

Usage::

    community-health
    community-health --root ./my-repo --verbose
    python -m community_health.cli -r ./my-repo
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateError

from .config import Config
from .generator import CommunityHealthGenerator
from .prompts import PromptAborted, PromptSequencer
from .utils import (
    console,
    print_completion_banner,
    print_error,
    print_summary_table,
    print_warning,
    print_written_files,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``community-health`` command."""
    parser = argparse.ArgumentParser(
        prog="community-health",
        description="Generate community health files (issue templates, "
        "contributing guide, code of conduct, funding config) for a repository.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  community-health\n"
            "  community-health --root ./my-repo --verbose\n"
        ),
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Destination root (default: $COMMUNITY_HEALTH_ROOT or the current directory)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every written file when done",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run the full prompt-then-generate flow and return an exit status."""
    args = build_parser().parse_args(argv)

    config = Config(root=Path(args.root)) if args.root else Config.from_env()

    try:
        answers = PromptSequencer(console=console).run()
    except KeyboardInterrupt:
        console.print()
        print_warning("Interrupted. No files were written.")
        return EXIT_INTERRUPTED
    except PromptAborted as exc:
        console.print()
        print_warning(f"{exc}. No files were written.")
        return EXIT_FAILURE

    generator = CommunityHealthGenerator(config)
    try:
        written = asyncio.run(generator.generate(answers))
    except (OSError, TemplateError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_FAILURE

    if args.verbose:
        print_summary_table(
            {
                "Root": str(config.root),
                "Directories": str(len(config.directories)),
                "Files": str(len(written)),
            }
        )
        print_written_files(written, config.root)

    print_completion_banner()
    return EXIT_OK


def main() -> None:
    """CLI entry point for ``community-health``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
