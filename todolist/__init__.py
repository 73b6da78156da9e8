"""todolist - named to-do tasks over HTTP."""

__version__ = "0.1.0"
__logo__ = "✅"
