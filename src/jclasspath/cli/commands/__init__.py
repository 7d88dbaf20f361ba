"""
CLI command implementations.

- find: look up a class by dotted name
- tree: render packages and classes
- expand: show how a classpath string expands
"""
