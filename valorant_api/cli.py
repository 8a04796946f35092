"""Command line access to the fetch helpers."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from valorant_api.config import ApiConfig
from valorant_api.errors import ConfigError, ValorantApiError
from valorant_api.logger import logger
from valorant_api.tracker import AccountRegion, Success, fetch_account, fetch_mmr, fetch_season_mmr

app = typer.Typer(no_args_is_help=True, help="Query the HenrikDev Valorant API.")

EXIT_FAILURE = 1
EXIT_ERROR = 2


def split_riot_id(riot_id: str) -> tuple[str, str]:
    name, sep, tag = riot_id.rpartition("#")
    if not sep or not name or not tag:
        raise typer.BadParameter(f"expected name#tag, got {riot_id!r}")
    return name, tag


def _emit(envelope) -> None:
    typer.echo(envelope.to_json(indent=2, ensure_ascii=False))
    if not isinstance(envelope, Success):
        raise typer.Exit(code=EXIT_FAILURE)


def _load_config(env_file: Path) -> ApiConfig:
    try:
        return ApiConfig.from_env(env_file)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=EXIT_ERROR)


def _run(coro) -> None:
    try:
        envelope = asyncio.run(coro)
    except ValorantApiError as e:
        logger.error(f"Request failed: {e}")
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=EXIT_ERROR)
    _emit(envelope)


@app.command()
def account(
        riot_id: str = typer.Argument(..., help="Player as name#tag"),
        env_file: Path = typer.Option(Path(".env"), help="dotenv file with HENRIK_API_* settings"),
) -> None:
    """Print the account profile of a player."""
    name, tag = split_riot_id(riot_id)
    config = _load_config(env_file)
    _run(fetch_account(name, tag, config=config))


@app.command()
def mmr(
        riot_id: str = typer.Argument(..., help="Player as name#tag"),
        region: AccountRegion = typer.Option(AccountRegion.EU, help="Account region"),
        season: Optional[str] = typer.Option(None, help="Only this act, e.g. e5a3"),
        env_file: Path = typer.Option(Path(".env"), help="dotenv file with HENRIK_API_* settings"),
) -> None:
    """Print the rank data of a player, optionally for a single act."""
    name, tag = split_riot_id(riot_id)
    config = _load_config(env_file)
    if season is None:
        _run(fetch_mmr(region, name, tag, config=config))
    else:
        _run(fetch_season_mmr(region, name, tag, season, config=config))


def main() -> None:
    app()
