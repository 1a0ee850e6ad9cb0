"""
Main entry point for the header-switcher CLI.
"""

from switcher.cli import cli


def main() -> None:
    """Main function for the header-switcher CLI."""
    cli()


if __name__ == "__main__":
    main()
