"""
PRD Wizard Package.

Interactive command-line wizard that turns a short questionnaire into a
Product Requirements Document in markdown.
"""

__version__ = "1.0.0"

from .answers import Answers
from .choices import AuthChoice, DatabaseChoice, resolve_choice
from .renderer import render_prd
from .writer import prd_filename, write_prd

__all__ = [
    "Answers",
    "AuthChoice",
    "DatabaseChoice",
    "resolve_choice",
    "render_prd",
    "prd_filename",
    "write_prd",
]
