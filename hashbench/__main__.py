"""
Entry point for the `hashbench` command-line interface.

hashbench times hash algorithm implementations on the current machine over
a file or generated random data.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the hashbench CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
