"""Command-line interface for the lifecycle manager."""
