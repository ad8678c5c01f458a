#!/usr/bin/env python3
"""
Learning Journal CLI launcher.

Runs the Typer application from a source checkout without installing
the package.

Usage:
    python cli.py --help
    python cli.py server start --reload
    python cli.py entries list
    python cli.py stats streak
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from learning_journal.cli.main import app  # noqa: E402

if __name__ == "__main__":
    app()
