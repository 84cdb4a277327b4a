"""Command line entry point for the helloharness transcoder."""

import logging
import sys
from pathlib import Path

import typer

from helloharness.config import Config
from helloharness.errors import ConfigError, ConfigNotFoundError, InputLoadError, ParseError, SerializeError
from helloharness.transcoder import RequestResponseTranscoder

cli = typer.Typer(help="helloharness: helloworld request/response transcoder")


def _setup_logging(config: Config, verbose: bool) -> None:
    """Configure root logging on stderr so stdout carries only the report lines."""
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(help="Read a request JSON file and print the request and response JSON")
def run(
    request_path: Path | None = typer.Argument(
        None,
        help="Path to the request JSON file (default: ./model/request.json)",
    ),
    config_path: Path | None = typer.Option(
        None,
        "-c",
        "--config",
        help="Path to a YAML configuration file",
    ),
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Enable debug logging on stderr",
    ),
) -> None:
    """Transcode the request file and exit 1 on parse or serialize failure, 2 on load or config failure."""
    try:
        config = Config.load(config_path) if config_path is not None else Config()
        _setup_logging(config, verbose)
    except (ConfigNotFoundError, ConfigError) as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(2)

    transcoder = RequestResponseTranscoder(config=config, stream=sys.stdout)
    try:
        transcoder.run(request_path)
    except InputLoadError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(2)
    except (ParseError, SerializeError) as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)
