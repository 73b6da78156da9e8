"""HTTP API for todolist."""
