"""Typer command line client for the API Explorer service."""
