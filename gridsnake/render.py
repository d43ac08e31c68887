"""
Render-sink boundary.

The core hands a snapshot to the renderer; the renderer maps cells to
screen positions. Nothing flows back into the simulation.
"""

from typing import List, Tuple

from .domain.game_state import GameState

HEAD = "head"
BODY = "body"
FOOD = "food"


def occupied_cells(state: GameState) -> List[Tuple[str, Tuple[int, int]]]:
    """Ordered (kind, cell) pairs: head, body from neck to tail, then food."""
    cells = [(HEAD, state.snake_positions[0])]
    cells.extend((BODY, cell) for cell in state.snake_positions[1:])
    if state.food is not None:
        cells.append((FOOD, state.food))
    return cells


def project(cell: Tuple[int, int], cell_size: int) -> Tuple[int, int]:
    """Screen position of a cell centre, with (0, 0) at the screen centre."""
    x, y = cell
    return (x * cell_size, y * cell_size)


def render_frame(state: GameState, cell_size: int) -> List[Tuple[str, Tuple[int, int]]]:
    return [(kind, project(cell, cell_size)) for kind, cell in occupied_cells(state)]
