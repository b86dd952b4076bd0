"""Parse livestream requests and re-emit them as JSON, YAML or TOML."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import toml
import yaml
from pydantic import ValidationError

from shared.logger import get_logger

from .schema import StreamRequest

logger = get_logger(__name__)


class ConversionFormat(str, Enum):
    """Supported conversion formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


class RequestSchemaError(ValueError):
    """Raised when a document does not describe a valid stream request."""


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


class RequestConverter:
    """
    Load stream requests and convert them between JSON, YAML, and TOML.

    Every document is validated against ``StreamRequest`` on the way in, so
    the output formats always carry the same typed values.
    """

    def __init__(self):
        """Initialize request converter."""
        logger.debug("Initialized RequestConverter")

    def load_file(self, filepath: Path, format: Optional[ConversionFormat] = None) -> StreamRequest:
        """
        Load a request from file.

        Args:
            filepath: Path to file
            format: Format to parse (auto-detect if None)

        Returns:
            Parsed request

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file cannot be read as UTF-8 or the format is unknown
            RequestSchemaError: If the document does not match the schema
        """
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        # Auto-detect format from extension
        if format is None:
            suffix = filepath.suffix.lower()
            if suffix == ".json":
                format = ConversionFormat.JSON
            elif suffix in [".yaml", ".yml"]:
                format = ConversionFormat.YAML
            elif suffix == ".toml":
                format = ConversionFormat.TOML
            else:
                raise ValueError(f"Cannot auto-detect format for: {filepath}")

        logger.info(f"Loading {format.value} from {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            logger.error(f"File is not valid UTF-8: {e}")
            raise ValueError(f"File is not valid UTF-8: {filepath}: {e}")
        except OSError as e:
            logger.error(f"Failed to read file: {e}")
            raise ValueError(f"Failed to read {filepath}: {e}")

        return self.parse(content, format)

    def parse(self, data: str, format: ConversionFormat = ConversionFormat.JSON) -> StreamRequest:
        """
        Parse a request document.

        Args:
            data: Document text
            format: Input format

        Returns:
            Parsed request

        Raises:
            RequestSchemaError: If parsing or validation fails
        """
        try:
            if format == ConversionFormat.JSON:
                return StreamRequest.model_validate_json(data)
            elif format == ConversionFormat.YAML:
                return StreamRequest.model_validate(yaml.safe_load(data))
            elif format == ConversionFormat.TOML:
                return StreamRequest.model_validate(toml.loads(data))
            else:
                raise ValueError(f"Unsupported format: {format}")

        except ValidationError as e:
            logger.error(f"Invalid {format.value} request: {e.error_count()} error(s)")
            raise RequestSchemaError(f"Invalid {format.value} request: {_describe(e)}")

        except (yaml.YAMLError, toml.TomlDecodeError) as e:
            logger.error(f"Failed to parse {format.value}: {e}")
            raise RequestSchemaError(f"Failed to parse {format.value}: {e}")

    def convert(
        self,
        request: StreamRequest,
        to_format: ConversionFormat,
        pretty: bool = True,
        indent: int = 2,
    ) -> str:
        """
        Convert a request to the specified format.

        Args:
            request: Parsed request
            to_format: Target format
            pretty: Whether to pretty-print (JSON only)
            indent: Indentation level

        Returns:
            Formatted string

        Raises:
            ValueError: If conversion fails
        """
        try:
            data = request.to_document()

            if to_format == ConversionFormat.JSON:
                if pretty:
                    return json.dumps(data, indent=indent, ensure_ascii=False)
                else:
                    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

            elif to_format == ConversionFormat.YAML:
                return yaml.dump(
                    data,
                    default_flow_style=False,
                    allow_unicode=True,
                    sort_keys=False,
                    indent=indent,
                )

            elif to_format == ConversionFormat.TOML:
                return toml.dumps(data)

            else:
                raise ValueError(f"Unsupported format: {to_format}")

        except (TypeError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to convert to {to_format.value}: {e}")
            raise ValueError(f"Failed to convert to {to_format.value}: {e}")

