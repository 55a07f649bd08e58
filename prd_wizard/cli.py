#!/usr/bin/env python3
"""
Command Line Interface for the PRD wizard.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import __version__
from .config import WizardConfig, load_config_from_args
from .logging_config import LOG_LEVELS, get_log_level, setup_logging
from .prompts import INFO_STYLE, PromptSession, collect_answers
from .renderer import render_prd, use_host_locale
from .writer import write_prd


logger = logging.getLogger('prd_wizard')

NEXT_STEPS = [
    "Review and refine the PRD with your team",
    "Get stakeholder approval",
    "Create detailed technical specifications",
    "Start development!",
]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="prd-wizard",
        description="Interactive Product Requirements Document generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Without options the wizard asks its questions and writes
PRD-<app-name>.md to the current directory. The options above only
change where the file and log output go.

Examples:
  # Answer the questions and write PRD-<app-name>.md here
  prd-wizard

  # Write the PRD into the docs directory
  prd-wizard --output-dir docs

  # Debug logging to a file
  prd-wizard --log-level debug --log-file wizard.log
"""
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=".",
        help="Directory to write the PRD to (default: current directory)"
    )

    log_group = parser.add_argument_group("Logging Options")
    log_group.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default="warn",
        help="Log level (default: warn)"
    )
    log_group.add_argument(
        "--log-file",
        default=None,
        help="Log output file (default: stderr)"
    )

    return parser


def run_wizard(config: WizardConfig, session: PromptSession) -> Path:
    """
    Collect answers, render the PRD and write it.

    Args:
        config: Run configuration
        session: Open prompt session

    Returns:
        Path of the written PRD

    Raises:
        OSError: If the PRD cannot be written
    """
    answers = collect_answers(session)
    document = render_prd(answers)
    path = write_prd(document, answers.app_name, config.output_dir)

    session.success(f"✅ PRD saved to {path.name}")
    session.console.print()
    session.info("📋 Next steps:", style=INFO_STYLE)
    for i, step in enumerate(NEXT_STEPS, start=1):
        session.info(f"{i}. {step}")

    return path


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the PRD wizard.

    Returns:
        Exit code (0 for success, 1 for error, 130 when interrupted)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    config = load_config_from_args(args)

    log_level = get_log_level(config.log_level)
    setup_logging(
        level=log_level,
        verbose=(log_level == logging.DEBUG),
        log_file=config.log_file,
    )
    use_host_locale()

    error_console = Console(stderr=True)

    try:
        with PromptSession() as session:
            run_wizard(config, session)
    except KeyboardInterrupt:
        error_console.print()
        error_console.print("Aborted.", style="yellow")
        return 130
    except Exception as e:
        logger.error(f"PRD generation failed: {e}")
        error_console.print(f"Error: {e}", style="red", markup=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
