from __future__ import annotations

from chainreaction.log import setup_logging
from chainreaction.ui.menu import run_menu


def main() -> None:
    setup_logging()
    run_menu()


if __name__ == "__main__":
    main()
