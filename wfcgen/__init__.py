"""Image generation by overlapping wave function collapse, with a command-line tool."""

__version__ = "0.1.0"