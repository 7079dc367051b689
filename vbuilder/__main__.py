"""
Entry point for the `vbuilder` command-line interface.

vbuilder builds a Go project and generates a systemd unit for it,
optionally installing and starting the unit.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the vbuilder CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
