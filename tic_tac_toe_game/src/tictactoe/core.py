from typing import List, Optional

from .logging_setup import get_logger
from .models import (  # noqa: F401
    CELL_COUNT,
    LINES,
    Board,
    Cell,
    GameState,
    InProgress,
    InvalidMoveReason,
    MoveOutcome,
    evaluate,
    winning_line,
)

logger = get_logger(__name__)


# PUBLIC_INTERFACE
def restart() -> GameState:
    """Fresh game: empty board, X to move."""
    return GameState()


def _rejection(state: GameState, index: object) -> Optional[InvalidMoveReason]:
    if state.is_over:
        return InvalidMoveReason.GAME_OVER
    # bool is an int subclass but never a cell index
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < CELL_COUNT:
        return InvalidMoveReason.OUT_OF_RANGE
    if state.board[index] != Cell.EMPTY:
        return InvalidMoveReason.OCCUPIED
    return None


# PUBLIC_INTERFACE
def try_move(state: GameState, index: int) -> MoveOutcome:
    """Attempt a move for the current player at the given cell index.

    A rejected move never raises: the outcome carries the unchanged state and
    the reason it was refused.
    """
    reason = _rejection(state, index)
    if reason is not None:
        logger.debug("Rejected move at %r: %s", index, reason.value)
        return MoveOutcome(state=state, accepted=False, reason=reason)

    board: Board = state.board[:index] + (state.current_player.cell,) + state.board[index + 1:]
    status = evaluate(board)
    if isinstance(status, InProgress):
        next_player = state.current_player.opposite()
    else:
        next_player = state.current_player
        logger.debug("Game finished after move at %d: %s", index, status.kind)

    new_state = GameState(board=board, current_player=next_player, status=status)
    return MoveOutcome(state=new_state, accepted=True)


# PUBLIC_INTERFACE
def apply_move(state: GameState, index: int) -> GameState:
    """Apply a move and return the resulting state (the same state if rejected)."""
    return try_move(state, index).state


# PUBLIC_INTERFACE
def available_moves(state: GameState) -> List[int]:
    """Empty cell indices, or none at all once the game is over."""
    if state.is_over:
        return []
    return [i for i, cell in enumerate(state.board) if cell == Cell.EMPTY]
