"""ch command-line entry point."""

from __future__ import annotations

from ch.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
