"""
loxscan Command-Line Interface
==============================

This package provides the ``loxscan`` command, a thin driver around the
scanner that reads a script file, standard input or interactive prompt
lines and prints the resulting tokens.

The tool is a Click application with help text and consistent exit
codes (see loxscan.cli.errors).
"""

__all__ = ["loxscan"]
