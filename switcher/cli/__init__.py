"""
CLI module for header-switcher.
"""

from switcher.cli.main import app

def cli():
    """Entry point for the CLI."""
    app()

__all__ = ['app', 'cli']
