"""Typer command-line interface for tzconv."""
