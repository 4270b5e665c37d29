"""
Input and output collaborators of the command line.

These helpers resolve where the message comes from (argument, file or
standard input), load the optional YAML configuration file and write the
result to standard output or a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import typer
import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from encrypt_decrypt.exceptions import InputSourceError, OutputSinkError

logger = logging.getLogger(__name__)


def dash_to_snake_case(name):
    """Converts a string from dash-case to snake_case."""
    return name.replace("-", "_")


class ConfigFileModel(BaseModel):
    """Option values read from a YAML configuration file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    mode: Optional[str] = None
    key: Optional[int] = None
    algorithm: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("alg", "algorithm")
    )
    data: Optional[str] = None
    input_path: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("in", "input", "input_path")
    )
    output_path: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("out", "output", "output_path")
    )


def load_config(config_path: Path) -> ConfigFileModel:
    """Load option values from a YAML file.

    :param config_path: Path to the YAML mapping

    :return: The validated option values

    :raises InputSourceError: If the file cannot be read or is not a valid mapping
    """
    try:
        with open(config_path, "r", encoding="utf-8") as file:
            content = yaml.safe_load(file)
    except OSError as e:
        raise InputSourceError(f"Cannot read configuration file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise InputSourceError(f"Invalid YAML in configuration file {config_path}: {e}") from e

    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise InputSourceError(
            f"Configuration file {config_path} must contain a mapping, got {type(content).__name__}"
        )

    try:
        config = ConfigFileModel.model_validate(
            {dash_to_snake_case(str(k)): v for k, v in content.items()}
        )
    except ValidationError as e:
        raise InputSourceError(f"Invalid configuration file {config_path}: {e}") from e

    # Relative paths are relative to the configuration file
    base_dir = Path(config_path).parent
    updates = {}
    for field in ("input_path", "output_path"):
        path = getattr(config, field)
        if path is not None and not path.is_absolute():
            updates[field] = base_dir / path
    if updates:
        config = config.model_copy(update=updates)

    logger.debug(f"Loaded configuration from {config_path}: {config.model_dump(exclude_none=True)}")
    return config


def read_message(
    data: Optional[str] = None,
    input_path: Optional[Path] = None,
    stdin: Optional[TextIO] = None,
) -> str:
    """Resolve the message to transform.

    ``data`` wins over ``input_path``; when neither is given the message is
    read from ``stdin``. Whitespace in an input file is collapsed to single
    spaces and trimmed.

    :raises InputSourceError: If the input file cannot be read
    """
    if data is not None:
        return data

    if input_path is not None:
        try:
            content = Path(input_path).read_text(encoding="utf-8", errors="surrogatepass")
        except (OSError, UnicodeDecodeError) as e:
            raise InputSourceError(f"Incorrect input file path {input_path}: {e}") from e
        logger.debug(f"Read {len(content)} characters from {input_path}")
        return " ".join(content.split())

    stream = stdin if stdin is not None else sys.stdin
    logger.debug("Reading message from standard input")
    return stream.read().rstrip("\r\n")


def write_output(result: str, output_path: Optional[Path] = None) -> None:
    """Write the result to ``output_path``, or to standard output.

    :raises OutputSinkError: If the output file cannot be written
    """
    if output_path is None:
        # Code points the terminal cannot encode (e.g. lone surrogates) print as "?"
        encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
        typer.echo(result.encode(encoding, errors="replace").decode(encoding))
        return

    try:
        Path(output_path).write_text(result, encoding="utf-8", errors="surrogatepass")
    except OSError as e:
        raise OutputSinkError(f"Cannot write output file {output_path}: {e}") from e
    logger.info(f"Output stored in {output_path}")


def merge_options(config: Optional[ConfigFileModel], **options: Any) -> dict[str, Any]:
    """Merge command line options over the values of a configuration file.

    Options left to ``None`` on the command line fall back to the file.
    """
    merged = config.model_dump() if config else {}
    merged.update({k: v for k, v in options.items() if v is not None})
    return merged
