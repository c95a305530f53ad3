from __future__ import annotations

import time

from chainreaction.ai.random_agent import RandomAgent
from chainreaction.game.controller import run_game
from chainreaction.ui.human import HumanAgent


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human (4 seats)")
    print("2) Human vs Random AI")
    print("3) Headless self-play (writes CSV)")

    choice = input("Choice: ").strip()

    if choice == "1":
        print("\nStarting game: 4 x Human")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game([HumanAgent()])
        return

    if choice == "2":
        agents = [HumanAgent(), RandomAgent(), RandomAgent(), RandomAgent()]
        print(f"\nStarting game: {agents[0].name} vs 3 x {agents[1].name}")
        print("Game will start in 3 seconds...\n")
        time.sleep(3)
        run_game(agents)
        return

    if choice == "3":
        from chainreaction.scripts.selfplay import main as selfplay_main
        selfplay_main([])
        return

    print("\nInvalid choice. Defaulting to Human vs Human.\n")
    time.sleep(3)
    run_game([HumanAgent()])
