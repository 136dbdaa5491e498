"""Entry point for the Chef Kiss Textual app."""

from __future__ import annotations

from chefkiss.chef_kiss_app import ChefKissApp
from chefkiss.debug_log import configure_logging


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    ChefKissApp().run()


if __name__ == "__main__":
    main()
