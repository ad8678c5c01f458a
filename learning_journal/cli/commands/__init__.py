"""
CLI Commands.

Organized by domain/feature area.
"""

from learning_journal.cli.commands.db import app as db_app
from learning_journal.cli.commands.entries import app as entries_app
from learning_journal.cli.commands.health import app as health_app
from learning_journal.cli.commands.server import app as server_app
from learning_journal.cli.commands.stats import app as stats_app
from learning_journal.cli.commands.tags import app as tags_app

__all__ = [
    "db_app",
    "entries_app",
    "health_app",
    "server_app",
    "stats_app",
    "tags_app",
]
