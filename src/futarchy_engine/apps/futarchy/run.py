"""CLI entry point for the futarchy engine.

All command logic lives in the cli subpackage.
"""

from futarchy_engine.apps.futarchy.cli import app

__all__ = ["app", "main"]


def main() -> None:
    """Run the futarchy CLI application."""
    app()


if __name__ == "__main__":
    main()
