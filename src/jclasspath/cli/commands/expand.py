"""
Expand Command - Show how a classpath string expands.
"""

import click

from ...core.expand import expand_path


@click.command()
@click.argument("path")
@click.option("--no-star", is_flag=True, help="Split only, do not expand * entries")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory * entries are listed in (default: current directory)",
)
def expand(path: str, no_star: bool, base_dir: str):
    """
    Expand a classpath PATH, one location per line.

    Entries are separated by the platform path separator
    (':' on POSIX, ';' on Windows).
    """
    for location in expand_path(path, expand_star=not no_star, base_dir=base_dir):
        click.echo(location)
