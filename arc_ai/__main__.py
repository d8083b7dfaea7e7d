"""Allow running arc-ai with `python -m arc_ai`."""

from arc_ai.cli import app

if __name__ == "__main__":
    app()
