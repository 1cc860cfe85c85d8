"""Database commands."""

import rich_click as click

from ..config import get_database_path
from ..db import init_db
from ._console import console


@click.group()
def db():
    """Database operations."""


@db.command("path")
def db_path():
    """Show database file path."""
    console.print(str(get_database_path()))


@db.command("init")
def db_init():
    """Create the database tables if they don't exist."""
    init_db()
    console.print(f"Database initialized at: {get_database_path()}")
