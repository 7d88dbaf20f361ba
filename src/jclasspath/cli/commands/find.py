"""
Find Command - Look up a class on the classpath.
"""

import sys
from typing import Optional

import click
from pydantic import BaseModel

from ...core.errors import FatalError
from ..utils import (
    classpath_options,
    configure_logging,
    echo_error,
    echo_info,
    echo_skipped,
    echo_success,
    load_classpath,
)


# --- API Models ---
class ClassLookup(BaseModel):
    """
    Structured response for the find command.
    """
    name: str
    found: bool
    binary: Optional[str] = None
    source: Optional[str] = None


@click.command()
@click.argument("name")
@classpath_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def find(
    name: str,
    boot: Optional[str],
    ext: Optional[str],
    user: Optional[str],
    source: Optional[str],
    codebase: Optional[str],
    config_path: str,
    verbose: bool,
    as_json: bool,
):
    """
    Find a class by its fully qualified NAME.

    Prints where the compiled class and its source were found. Exits with
    status 1 if the class is not on the classpath.
    """
    configure_logging(verbose)
    classpath = load_classpath(config_path, boot, ext, user, source, codebase)
    if verbose and not as_json:
        echo_skipped(classpath)

    try:
        rep = classpath.find_class(name)
    except FatalError as e:
        echo_error(f"Classpath is inconsistent: {e}")
        sys.exit(2)

    lookup = ClassLookup(
        name=name,
        found=rep is not None,
        binary=str(rep.binary) if rep is not None and rep.binary is not None else None,
        source=str(rep.source) if rep is not None and rep.source is not None else None,
    )

    if as_json:
        click.echo(lookup.model_dump_json(indent=2))
    elif lookup.found:
        echo_success(f"Found {name}")
        echo_info(f"class:  {lookup.binary or '-'}")
        echo_info(f"source: {lookup.source or '-'}")
    else:
        echo_error(f"{name} not found on the classpath")

    if not lookup.found:
        sys.exit(1)
