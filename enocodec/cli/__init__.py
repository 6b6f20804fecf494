"""Command-line interface for eno-codec."""
