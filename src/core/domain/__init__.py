"""Domain models and errors.

Why here:
- Pure values shared by the CLI, the services and the adapters.
- The domain knows nothing about subprocess, typer or rich.
"""
