"""
CLI interface to encrypt and decrypt messages.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from encrypt_decrypt import __version__
from encrypt_decrypt.ciphers import get_registry
from encrypt_decrypt.exceptions import EncryptDecryptError
from encrypt_decrypt.io import load_config, merge_options, read_message, write_output
from encrypt_decrypt.models import Algorithm, Configuration, Mode

app = typer.Typer(no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool):
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


def _option(options: dict, name: str, default):
    value = options.get(name)
    return default if value is None else value


def version_callback(value: bool):
    """Callback for --version flag."""
    if value:
        typer.echo(f"encrypt-decrypt {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    Encrypt or decrypt messages with a shift or a unicode cipher.
    """


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


@app.command("run")
def run_command(
    mode: Optional[str] = typer.Option(
        None, "--mode", help="'enc' or 'dec' (default: enc)"
    ),
    key: Optional[int] = typer.Option(None, "--key", help="Shift to apply (default: 0)"),
    alg: Optional[str] = typer.Option(
        None, "--alg", help="'shift' or 'unicode' (default: shift)"
    ),
    data: Optional[str] = typer.Option(None, "--data", help="Message to transform"),
    input_path: Optional[Path] = typer.Option(
        None, "--in", help="File containing the message"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--out", help="File receiving the result instead of stdout"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML file providing default option values"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """
    Transform a message and write the result.

    The message is taken from --data, then --in, then standard input.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path) if config_path else None
        options = merge_options(
            config,
            mode=mode,
            key=key,
            algorithm=alg,
            data=data,
            input_path=input_path,
            output_path=output_path,
        )

        # Reject bad modes and algorithms before waiting on stdin
        resolved_mode = Mode.parse(_option(options, "mode", Mode.ENCRYPT))
        resolved_algorithm = Algorithm.parse(_option(options, "algorithm", Algorithm.SHIFT))

        configuration = Configuration(
            mode=resolved_mode,
            key=_option(options, "key", 0),
            algorithm=resolved_algorithm,
            text=read_message(options.get("data"), options.get("input_path")),
        )
        logger.debug(f"Resolved configuration: {configuration!r}")

        result = configuration.run()
        write_output(result, options.get("output_path"))
    except EncryptDecryptError as ex:
        err_console.print(f"[red]:heavy_multiplication_x:[/red] {escape(str(ex))}")
        raise typer.Exit(code=1)


@app.command("list")
def list_command():
    """
    List the available ciphers.
    """
    registry = get_registry()

    table = Table(title="Available ciphers")
    table.add_column("Algorithm", style="bold cyan")
    table.add_column("Class")
    table.add_column("Version")
    table.add_column("Description")

    for name in registry.list_plugins():
        info = registry.get_plugin_info(name) or {}
        table.add_row(
            name,
            info.get("name", ""),
            info.get("version", ""),
            info.get("description", ""),
        )

    console.print(table)


if __name__ == "__main__":
    app()
