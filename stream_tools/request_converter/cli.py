"""CLI interface for Request Converter."""

import sys
from pathlib import Path

import click

from shared.cli import error, handle_errors, info, success
from shared.logger import setup_logger

from .converter import ConversionFormat, RequestConverter

# Read from the working directory
REQUEST_PATH = Path("request.json")


def transcode_request(path: Path = REQUEST_PATH) -> None:
    """
    Print the YAML and TOML renderings of a request file, each after a label.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be read, parsed, or converted
    """
    converter = RequestConverter()

    info(f"Loading {path}")
    request = converter.load_file(path, format=ConversionFormat.JSON)

    yaml_str = converter.convert(request, ConversionFormat.YAML)
    toml_str = converter.convert(request, ConversionFormat.TOML)

    print(f"YAML:\n{yaml_str}")
    print(f"TOML:\n{toml_str}")


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(verbose: bool):
    """
    Request Converter - Print request.json as YAML and TOML.

    Reads request.json from the current directory.

    Examples:

        \b
        # Convert the request in the current directory
        request-convert
    """
    # Setup logging
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    try:
        transcode_request()
        success(f"Converted {REQUEST_PATH} to YAML and TOML")
        sys.exit(0)

    except FileNotFoundError as e:
        error(str(e))
        sys.exit(1)

    except ValueError as e:
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
