"""Command-line interface for ledgerlens."""
