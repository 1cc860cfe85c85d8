"""CLI entry point for tweetclone."""

import logging

import rich_click as click
from rich.logging import RichHandler

from .. import __version__

# Import command modules — avoid shadowing module names with command objects
# so that `import tweetclone.cli.<module>` still resolves to the module.
from . import config_cmd as _config_mod
from . import db_cmd as _db_mod
from . import follows as _follows_mod
from . import statuses as _statuses_mod
from . import users as _users_mod
from . import web as _web_mod
from ._console import console


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Micro-blogging: post statuses, follow users, send direct messages."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Register commands
cli.add_command(_db_mod.db)
cli.add_command(_config_mod.config)
cli.add_command(_users_mod.users)
cli.add_command(_statuses_mod.post)
cli.add_command(_statuses_mod.timeline)
cli.add_command(_statuses_mod.public)
cli.add_command(_statuses_mod.replies)
cli.add_command(_statuses_mod.messages)
cli.add_command(_follows_mod.follows)
cli.add_command(_follows_mod.followers)
cli.add_command(_follows_mod.friends)
cli.add_command(_follows_mod.unfollow)
cli.add_command(_web_mod.web)


if __name__ == "__main__":
    cli()
