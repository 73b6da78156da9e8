"""Command line interface for todolist."""
