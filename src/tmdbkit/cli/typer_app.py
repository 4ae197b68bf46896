"""
tmdbkit Typer CLI Application

Thin command line front end over :class:`~tmdbkit.TMDBClient`. Each command
fetches one resource and prints the decoded payload as JSON.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import Annotated

import typer
from pydantic import BaseModel
from rich.console import Console

from tmdbkit import __version__
from tmdbkit.cli.context import CliContext, LogLevel, get_cli_context, set_cli_context
from tmdbkit.cli.error_handler import handle_cli_error
from tmdbkit.cli.options import (
    api_key_option,
    auto_retry_option,
    json_errors_option,
    language_option,
    log_level_option,
    parse_request_options,
    request_option,
)
from tmdbkit.config import load_logging_settings, load_settings
from tmdbkit.services.tmdb import TMDBClient
from tmdbkit.shared.errors import ApplicationError, ErrorCode, ErrorContext
from tmdbkit.shared.logging import log_operation_success, setup_structured_logger

logger = logging.getLogger(__name__)


class SearchType(str, Enum):
    """Searchable resource families."""

    MULTI = "multi"
    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"
    COLLECTION = "collection"
    COMPANY = "company"
    KEYWORD = "keyword"


class GenreType(str, Enum):
    MOVIE = "movie"
    TV = "tv"


app = typer.Typer(
    name="tmdbkit",
    help="Query The Movie Database (TMDB) v3 API from the command line.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(f"tmdbkit {__version__}")
        raise typer.Exit


@app.callback()
def main(
    log_level: Annotated[LogLevel | None, log_level_option] = None,
    api_key: Annotated[str | None, api_key_option] = None,
    auto_retry: Annotated[bool, auto_retry_option] = False,
    json_errors: Annotated[bool, json_errors_option] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version information and exit.",
        ),
    ] = False,
) -> None:
    """Process global options before any command runs."""
    try:
        level = _configure_logging(log_level)
    except ApplicationError as e:
        exit_code = handle_cli_error(e, "tmdbkit", json_output=json_errors)
        raise typer.Exit(exit_code) from e

    set_cli_context(
        CliContext(
            log_level=level,
            api_key=api_key,
            auto_retry=auto_retry,
            json_errors=json_errors,
        ),
    )


def _configure_logging(log_level: LogLevel | None) -> LogLevel:
    # Without --log-level the level comes from TMDBKIT_LOG_LEVEL.
    logging_settings = load_logging_settings()
    level = log_level or LogLevel(logging_settings.level)
    try:
        setup_structured_logger(
            level=level.value,
            log_file=logging_settings.file,
            use_rich_console=logging_settings.rich_console,
        )
    except OSError as e:
        raise ApplicationError(
            ErrorCode.CONFIG_INVALID,
            f"Cannot open log file {logging_settings.file}: {e.strerror or e}",
            ErrorContext(operation="setup_structured_logger"),
            original_error=e,
        ) from e
    return level


def _build_client(context: CliContext) -> TMDBClient:
    # Unset flags fall back to TMDB_* environment variables.
    settings = load_settings(
        api_key=context.api_key,
        auto_retry=context.auto_retry or None,
    )
    return TMDBClient.from_settings(settings.tmdb)


def _run(command: str, call: Callable[[TMDBClient], BaseModel]) -> None:
    context = get_cli_context()
    started = time.perf_counter()
    try:
        with _build_client(context) as client:
            result = call(client)
    except Exception as e:
        exit_code = handle_cli_error(e, command, json_output=context.json_errors)
        raise typer.Exit(exit_code) from e

    log_operation_success(
        logger,
        command,
        (time.perf_counter() - started) * 1000,
        {"model": type(result).__name__},
    )
    Console().print_json(result.model_dump_json())


@app.command("movie")
def movie_command(
    movie_id: Annotated[int, typer.Argument(help="TMDB movie id.")],
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Show the details of a movie."""
    _run(
        "movie",
        lambda client: client.get_movie_details(
            movie_id,
            parse_request_options(option, language),
        ),
    )


@app.command("tv")
def tv_command(
    tv_id: Annotated[int, typer.Argument(help="TMDB TV show id.")],
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Show the details of a TV show."""
    _run(
        "tv",
        lambda client: client.get_tv_details(tv_id, parse_request_options(option, language)),
    )


@app.command("season")
def season_command(
    tv_id: Annotated[int, typer.Argument(help="TMDB TV show id.")],
    season_number: Annotated[int, typer.Argument(help="Season number.")],
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Show the details of a TV season."""
    _run(
        "season",
        lambda client: client.get_tv_season_details(
            tv_id,
            season_number,
            parse_request_options(option, language),
        ),
    )


@app.command("episode")
def episode_command(
    tv_id: Annotated[int, typer.Argument(help="TMDB TV show id.")],
    season_number: Annotated[int, typer.Argument(help="Season number.")],
    episode_number: Annotated[int, typer.Argument(help="Episode number.")],
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Show the details of a TV episode."""
    _run(
        "episode",
        lambda client: client.get_tv_episode_details(
            tv_id,
            season_number,
            episode_number,
            parse_request_options(option, language),
        ),
    )


@app.command("person")
def person_command(
    person_id: Annotated[int, typer.Argument(help="TMDB person id.")],
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Show the details of a person."""
    _run(
        "person",
        lambda client: client.get_person_details(
            person_id,
            parse_request_options(option, language),
        ),
    )


_SEARCHES: dict[SearchType, Callable[..., BaseModel]] = {
    SearchType.MULTI: TMDBClient.search_multi,
    SearchType.MOVIE: TMDBClient.search_movies,
    SearchType.TV: TMDBClient.search_tv_shows,
    SearchType.PERSON: TMDBClient.search_people,
    SearchType.COLLECTION: TMDBClient.search_collections,
    SearchType.COMPANY: TMDBClient.search_companies,
    SearchType.KEYWORD: TMDBClient.search_keywords,
}


@app.command("search")
def search_command(
    query: Annotated[str, typer.Argument(help="Text to search for.")],
    search_type: Annotated[
        SearchType,
        typer.Option("--type", "-t", case_sensitive=False, help="Resource family to search."),
    ] = SearchType.MULTI,
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """Search TMDB by text."""
    search = _SEARCHES[search_type]
    _run(
        "search",
        lambda client: search(client, query, parse_request_options(option, language)),
    )


@app.command("genres")
def genres_command(
    media_type: Annotated[
        GenreType,
        typer.Option("--type", "-t", case_sensitive=False, help="Movie or TV genres."),
    ] = GenreType.MOVIE,
    option: Annotated[list[str] | None, request_option] = None,
    language: Annotated[str | None, language_option] = None,
) -> None:
    """List the official genres."""
    if media_type is GenreType.TV:
        fetch = TMDBClient.get_genre_tv_list
    else:
        fetch = TMDBClient.get_genre_movie_list
    _run("genres", lambda client: fetch(client, parse_request_options(option, language)))
