"""Command-line entry points for the demo command processor."""
