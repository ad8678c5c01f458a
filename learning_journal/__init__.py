"""
Learning Journal.

- backend/: REST API, persistence, configuration, logging
- client/: httpx API client plus streak, export and grouping views
- cli/: Terminal front end (Typer + Rich)
"""
