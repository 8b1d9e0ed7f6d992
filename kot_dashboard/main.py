"""Entry point for the KOT order board Textual app."""

from __future__ import annotations

from kot_dashboard.board_app import OrderBoardApp
from kot_dashboard.logging_config import setup_logging


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    OrderBoardApp().run()


if __name__ == "__main__":
    main()
