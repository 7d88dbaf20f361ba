"""
Tree Command - Render the packages and classes of a classpath.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...core.classpath import ClassPath, MergedClassPath
from ..utils import classpath_options, configure_logging, echo_error, echo_skipped, load_classpath

console = Console()


def _describe(rep) -> str:
    kinds = []
    if rep.binary is not None:
        kinds.append("class")
    if rep.source is not None:
        kinds.append("source")
    return "+".join(kinds)


def build_tree(label: str, node: ClassPath, depth: int) -> Tree:
    """Build a rich Tree for node, descending at most depth package levels."""
    merged = " [dim](merged)[/dim]" if isinstance(node, MergedClassPath) else ""
    tree = Tree(f"📦 [bold]{escape(label)}[/bold]{merged}")
    _add_children(tree, node, depth)
    return tree


def _add_children(tree: Tree, node: ClassPath, depth: int) -> None:
    if depth > 0:
        for package in node.packages:
            merged = " [dim](merged)[/dim]" if isinstance(package, MergedClassPath) else ""
            branch = tree.add(f"📦 [bold]{escape(package.name)}[/bold]{merged}")
            _add_children(branch, package, depth - 1)
    elif node.packages:
        tree.add(f"[dim]… {len(node.packages)} packages[/dim]")

    for rep in node.classes:
        tree.add(f"{escape(rep.name)} [dim]({_describe(rep)})[/dim]")


@click.command()
@click.argument("package", default="")
@click.option("-d", "--depth", default=1, show_default=True, help="Package levels to expand")
@classpath_options
def tree(
    package: str,
    depth: int,
    boot: Optional[str],
    ext: Optional[str],
    user: Optional[str],
    source: Optional[str],
    codebase: Optional[str],
    config_path: str,
    verbose: bool,
):
    """
    Show the packages and classes under PACKAGE (default: the root).
    """
    configure_logging(verbose)
    classpath = load_classpath(config_path, boot, ext, user, source, codebase)
    if verbose:
        echo_skipped(classpath)

    node = classpath.find_package(package)
    if node is None:
        echo_error(f"Package '{package}' not found on the classpath")
        sys.exit(1)

    console.print(build_tree(package or "<root>", node, depth))
