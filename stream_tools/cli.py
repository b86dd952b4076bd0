"""Combined entry point: transcode request.json, then run the event demo."""

import sys

import click

from shared.cli import error, handle_errors
from shared.logger import setup_logger

from .event_demo.cli import run_demo
from .request_converter.cli import transcode_request


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(verbose: bool):
    """
    Stream Tools - Print request.json as YAML and TOML, then round-trip a sample event.

    Examples:

        \b
        # Run from the directory holding request.json
        stream-tools
    """
    # Setup logging
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    try:
        transcode_request()
        run_demo()
        sys.exit(0)

    except FileNotFoundError as e:
        error(str(e))
        sys.exit(1)

    except ValueError as e:
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
