"""Command-line parsing for devtool."""
