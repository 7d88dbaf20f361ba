"""
CLI Utilities - Shared helpers for command line operations.

Provides the classpath options every command accepts, the logic that turns
them (plus jclasspath.toml and the environment) into a JavaClassPath, and
formatted printing.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click

from ..config import DEFAULT_MANIFEST_NAME
from ..core.assembler import JavaClassPath
from ..core.errors import ManifestError
from ..core.manifest import ClasspathManifest


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross to stderr.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol to stderr.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def classpath_options(func: Callable) -> Callable:
    """Attach the options that describe a classpath to a command."""
    options = [
        click.option("--boot", default=None, help="Boot classpath"),
        click.option("--ext", default=None, help="Extension directories"),
        click.option("-cp", "--classpath", "user", default=None, help="User classpath (supports *)"),
        click.option("--sourcepath", "source", default=None, help="Source path"),
        click.option("--codebase", default=None, help="Space separated archive URLs"),
        click.option(
            "--config",
            "config_path",
            default=DEFAULT_MANIFEST_NAME,
            type=click.Path(dir_okay=False),
            help=f"Manifest file (default: {DEFAULT_MANIFEST_NAME})",
        ),
        click.option("-v", "--verbose", is_flag=True, help="Log resolution details"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="[%X]",
        )


def load_classpath(
    config_path: str,
    boot: Optional[str] = None,
    ext: Optional[str] = None,
    user: Optional[str] = None,
    source: Optional[str] = None,
    codebase: Optional[str] = None,
) -> JavaClassPath:
    """
    Build the classpath from the manifest, environment and explicit options.

    Explicit options win over the environment, which wins over the manifest.
    Exits with status 2 if the manifest is malformed.
    """
    try:
        manifest = ClasspathManifest.load(Path(config_path))
    except ManifestError as e:
        echo_error(str(e))
        sys.exit(2)

    manifest = manifest.with_env().with_overrides(
        boot=boot, ext=ext, user=user, source=source, codebase=codebase
    )
    return manifest.build()


def echo_skipped(classpath: JavaClassPath) -> None:
    """Report the configured locations that contributed nothing."""
    for entry in classpath.skipped:
        echo_warning(f"Skipped {entry.category} entry '{entry.location}': {entry.reason}")
