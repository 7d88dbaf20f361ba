"""Command line interface for jclasspath."""
