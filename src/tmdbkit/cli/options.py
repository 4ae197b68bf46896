"""
Reusable Typer Options Module

Options shared by the tmdbkit commands are defined once here:

- log_level / api_key / auto_retry / json_errors: global options of the app
- option / language: per-command request options
"""

from __future__ import annotations

import typer

from tmdbkit.shared.errors import create_validation_error

log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help=(
        "Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). "
        "Falls back to TMDBKIT_LOG_LEVEL, then WARNING."
    ),
)

api_key_option = typer.Option(
    "--api-key",
    help="TMDB API key. Falls back to the TMDB_API_KEY environment variable.",
    show_default=False,
)

auto_retry_option = typer.Option(
    "--auto-retry",
    help="Retry automatically when TMDB answers 429 Too Many Requests.",
)

json_errors_option = typer.Option(
    "--json-errors",
    help="Report errors as machine-readable JSON on stdout.",
)

request_option = typer.Option(
    "--option",
    "-o",
    help="Extra request option as KEY=VALUE. May be repeated.",
    show_default=False,
)

language_option = typer.Option(
    "--language",
    "-l",
    help="Language of localized fields, e.g. pt-BR.",
    show_default=False,
)


def parse_request_options(
    pairs: list[str] | None,
    language: str | None = None,
) -> dict[str, str]:
    """Turn repeated ``KEY=VALUE`` arguments into a request options mapping.

    ``--language`` wins over a ``language`` pair given through ``--option``.

    Raises:
        DomainError: If a pair has no ``=`` or an empty key
    """
    options: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise create_validation_error(
                f"Invalid option '{pair}': expected KEY=VALUE",
                field="option",
                operation="parse_request_options",
            )
        options[key.strip()] = value
    if language:
        options["language"] = language
    return options
