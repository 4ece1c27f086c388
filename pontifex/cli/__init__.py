"""Command line interface for Pontifex."""
