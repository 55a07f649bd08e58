"""
Run configuration for the PRD wizard.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WizardConfig:
    """
    Configuration for a wizard run.

    Attributes:
        output_dir: Directory the PRD is written to
        log_level: Logging level name (debug, info, warn, error)
        log_file: Log output file path (None = stderr only)
    """
    output_dir: str = "."
    log_level: str = "warn"
    log_file: Optional[str] = None


def load_config_from_args(args) -> WizardConfig:
    """
    Create WizardConfig from parsed command line arguments.

    Args:
        args: Parsed argparse namespace

    Returns:
        WizardConfig instance
    """
    return WizardConfig(
        output_dir=getattr(args, 'output_dir', None) or ".",
        log_level=getattr(args, 'log_level', "warn"),
        log_file=getattr(args, 'log_file', None),
    )
