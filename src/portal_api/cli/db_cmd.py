"""Database migration CLI commands using Alembic programmatically."""

from pathlib import Path

import typer
from alembic import command
from alembic.config import Config
from loguru import logger

db_app = typer.Typer()

ConfigOption = typer.Option("alembic.ini", "--config", "-c", help="Path to alembic.ini")


def _alembic_config(path: str) -> Config:
    """Load the Alembic configuration, exiting with status 1 if it is missing."""
    if not Path(path).is_file():
        logger.error(f"Alembic config not found: {path}")
        raise typer.Exit(code=1)
    return Config(path)


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    config_path: str = ConfigOption,
) -> None:
    """Create or migrate the content tables up to the target revision."""
    config = _alembic_config(config_path)
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(config, revision)
    logger.info("Database upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: str = ConfigOption,
) -> None:
    """Roll the content tables back to the target revision."""
    config = _alembic_config(config_path)
    logger.info(f"Downgrading database to {revision}")
    command.downgrade(config, revision)
    logger.info("Database downgrade complete")


@db_app.command()
def current(config_path: str = ConfigOption) -> None:
    """Show the revision the database is at."""
    command.current(_alembic_config(config_path), verbose=True)


@db_app.command()
def history(config_path: str = ConfigOption) -> None:
    """List every known migration revision."""
    command.history(_alembic_config(config_path), verbose=False)
