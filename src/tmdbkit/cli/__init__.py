"""Command line interface for tmdbkit."""
