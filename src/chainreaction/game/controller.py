from __future__ import annotations

from typing import Dict, Optional, Sequence

from chainreaction.ai.base import Agent
from chainreaction.config import COLS, HIGHLIGHT_EXPLOSIONS, MAX_MOVES, ROWS
from chainreaction.errors import InvariantViolation
from chainreaction.game.engine import Engine
from chainreaction.types import TURN_ORDER, Player
from chainreaction.ui.colors import player_label
from chainreaction.ui.effects import ai_thinking
from chainreaction.ui.prompts import parse_move
from chainreaction.ui.render import render


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def seat_agents(agents: Sequence[Agent]) -> Dict[Player, Agent]:
    if not agents or len(agents) > len(TURN_ORDER):
        raise ValueError(f"Need between 1 and {len(TURN_ORDER)} agents, got {len(agents)}.")
    # Fewer agents than seats: the list wraps around the ring.
    return {p: agents[i % len(agents)] for i, p in enumerate(TURN_ORDER)}


def _status_with_agents(status: str, seats: Dict[Player, Agent], current: Player, moves: int) -> str:
    """
    Prepend a persistent header showing who sits in each seat.
    """
    who = " | ".join(f"{player_label(p)}: {_agent_name(a, str(p))}" for p, a in seats.items())
    header = f"{who}\nMove {moves + 1} | Turn: {player_label(current)}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    agents: Sequence[Agent],
    *,
    rows: int = ROWS,
    cols: int = COLS,
    show_thinking: bool = True,
    max_moves: Optional[int] = MAX_MOVES,
) -> Engine:
    engine = Engine(rows, cols)
    state = engine.state
    seats = seat_agents(agents)

    while True:
        exploded = state.last_result.topples if (state.last_result and HIGHLIGHT_EXPLOSIONS) else None
        render(
            state.grid,
            _status_with_agents(state.last_status, seats, state.current, state.moves_played),
            last_move=state.last_move,
            exploded=exploded,
        )

        if max_moves is not None and state.moves_played >= max_moves:
            print(f"Move limit reached ({max_moves}).")
            return engine

        current_agent = seats[state.current]
        mover = state.current

        try:
            if current_agent.name == "Human":
                raw = input(f"{mover} move (row col): ")
                move = parse_move(raw, rows, cols)
                if move is None:
                    print("Game quit.")
                    return engine
            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")
                move = current_agent.choose_move(state)

            result = engine.play(move[0], move[1])
            if result is None:
                state.last_status = f"Cell {move[0] + 1} {move[1] + 1} belongs to another player."
                continue

            state.last_status = f"{mover} played {move[0] + 1} {move[1] + 1}"
            if result.topples:
                state.last_status += f" | {len(result.topples)} explosions"
            state.last_status += f" | Next: {state.current}"

        except ValueError as e:
            if current_agent.name != "Human":
                # Agent has nowhere to play; without a win rule the game just stops.
                print(f"{mover}: {e}")
                return engine
            state.last_status = str(e)

        except InvariantViolation as e:
            # Engine already rolled the board back to before this move.
            state.last_status = f"{mover} played into a board that can no longer settle; game over."
            render(state.grid, _status_with_agents(state.last_status, seats, state.current, state.moves_played),
                   last_move=state.last_move)
            print(e)
            return engine
