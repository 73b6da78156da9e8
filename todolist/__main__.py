"""Entry point for running todolist as a module."""

from todolist.cli.commands import app

if __name__ == "__main__":
    app()
