"""Command line interface for Pitu."""
