"""fluidstate command-line interface package.

Supports ``python -m fluidstate.cli`` as an alternative to the ``fluidstate`` entry point.
"""

from fluidstate.cli.main import cli, main

__all__ = ["cli", "main"]
