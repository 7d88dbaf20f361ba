"""
jclasspath CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import expand, find, tree


@click.group()
@click.version_option(package_name="jclasspath")
def main():
    """jclasspath: JVM classpath resolution.

    Resolves boot, extension, user, codebase and source paths into one
    view of the classes a compiler would see.

    \b
    Quick Start:
      jclasspath find scala.Option -cp "lib/*"
      jclasspath tree java.util --boot rt.jar
      jclasspath expand "lib/*:classes"
    """
    pass


main.add_command(find.find)
main.add_command(tree.tree)
main.add_command(expand.expand)

if __name__ == "__main__":
    main()
