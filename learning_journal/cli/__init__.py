"""
Terminal Front End.

Typer + Rich command-line client for the journal API.

Architecture:
- CLI is a thin presentation layer
- Persistence lives in the backend; streaks and exports are computed
  client-side from fetched entries (learning_journal.client)
- CLI calls backend via HTTP (httpx)
- Sends X-Frontend-ID: cli header for log routing

Usage:
    python cli.py --help
    python cli.py entries list
    python cli.py stats streak
"""
