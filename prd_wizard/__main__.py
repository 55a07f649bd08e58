"""
PRD wizard - Package entry point.

Allows running the wizard with: python -m prd_wizard
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
