"""File and stream I/O for the command layer."""
