"""CLI interface for Event Demo."""

import click

from shared.cli import handle_errors
from shared.logger import get_logger, setup_logger

from .date_codec import Date
from .models import Event

logger = get_logger(__name__)


def build_event() -> Event:
    return Event(name="Concert", date=Date(day=15, month=11, year=2024))


def run_demo() -> Event:
    """
    Serialize a sample event to JSON, print it, parse it back and print the result.

    Returns:
        The event parsed back from JSON
    """
    event = build_event()

    json_str = event.model_dump_json()
    print(f"Serialized JSON: {json_str}")

    restored = Event.model_validate_json(json_str)
    logger.debug(f"Round trip equal: {restored == event}")
    print(f"Deserialized event: {restored!r}")

    return restored


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(verbose: bool):
    """
    Event Demo - Round-trip an event with a DD|MM|YYYY date through JSON.

    Examples:

        \b
        event-demo
    """
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    run_demo()


if __name__ == "__main__":
    main()
