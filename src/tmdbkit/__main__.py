"""Entry point for ``python -m tmdbkit``."""

from tmdbkit.cli.typer_app import app

if __name__ == "__main__":
    app()
