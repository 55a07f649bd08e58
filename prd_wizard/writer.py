"""
Output file handling for rendered PRDs.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify_app_name(app_name: str) -> str:
    """Collapse whitespace runs to single hyphens and lower-case."""
    return _WHITESPACE_RUN.sub("-", app_name).lower()


def prd_filename(app_name: str) -> str:
    """
    File name for an application's PRD.

    Example:
        >>> prd_filename("My   Cool App")
        'PRD-my-cool-app.md'
    """
    return f"PRD-{slugify_app_name(app_name)}.md"


def write_prd(
    document: str,
    app_name: str,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Write a rendered PRD, replacing any existing file of the same name.

    Args:
        document: Rendered markdown
        app_name: Application name the file is named after
        directory: Target directory (default: current working directory)

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(directory) if directory is not None else Path.cwd()
    path = path / prd_filename(app_name)

    if path.exists():
        logger.debug(f"Overwriting existing file: {path}")

    with open(path, 'w', encoding='utf-8') as f:
        f.write(document)

    logger.info(f"Wrote PRD: {path} ({len(document)} chars)")
    return path
