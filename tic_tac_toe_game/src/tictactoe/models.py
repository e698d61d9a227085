from enum import Enum
from typing import Annotated, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


# PUBLIC_INTERFACE
class Cell(str, Enum):
    """Content of a single board square."""
    EMPTY = ""
    X = "X"
    O = "O"


# PUBLIC_INTERFACE
class Player(str, Enum):
    """The two players. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @property
    def cell(self) -> Cell:
        """The symbol this player writes into the board."""
        return Cell(self.value)


Board = Tuple[Cell, ...]


def empty_board() -> Board:
    return tuple(Cell.EMPTY for _ in range(CELL_COUNT))


# PUBLIC_INTERFACE
class InProgress(BaseModel):
    """Game is still accepting moves."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["in_progress"] = "in_progress"


# PUBLIC_INTERFACE
class Won(BaseModel):
    """A player completed a line."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["won"] = "won"
    player: Player = Field(..., description="The player owning the winning line.")


# PUBLIC_INTERFACE
class Draw(BaseModel):
    """Board full with no winning line."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["draw"] = "draw"


GameStatus = Annotated[Union[InProgress, Won, Draw], Field(discriminator="kind")]


def is_terminal(status: GameStatus) -> bool:
    return not isinstance(status, InProgress)


# Checked in this order; the first complete line decides the winner.
LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


# PUBLIC_INTERFACE
def winning_line(board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
    """Return the first completed line on the board, or None."""
    for line in LINES:
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


# PUBLIC_INTERFACE
def evaluate(board: Sequence[Cell]) -> GameStatus:
    """Derive the status of a board: Won(player), Draw or InProgress."""
    line = winning_line(board)
    if line is not None:
        return Won(player=Player(Cell(board[line[0]]).value))
    if all(cell != Cell.EMPTY for cell in board):
        return Draw()
    return InProgress()


# PUBLIC_INTERFACE
class GameState(BaseModel):
    """Immutable snapshot of one game: board, player to move and status."""
    model_config = ConfigDict(frozen=True)

    board: Board = Field(
        default_factory=empty_board,
        min_length=CELL_COUNT,
        max_length=CELL_COUNT,
        description="9 cells in row-major order (index = row*3 + col).",
    )
    current_player: Player = Field(default=Player.X, description="Player whose turn it is.")
    status: GameStatus = Field(default_factory=InProgress, description="Derived game status.")

    @field_validator("board")
    @classmethod
    def check_turn_balance(cls, board: Board) -> Board:
        balance = board.count(Cell.X) - board.count(Cell.O)
        if balance not in (0, 1):
            raise ValueError(f"X count minus O count must be 0 or 1, got {balance}")
        return board

    @model_validator(mode="after")
    def check_consistent_with_board(self) -> "GameState":
        """Status and player to move must be the ones the board implies."""
        derived = evaluate(self.board)
        if self.status != derived:
            raise ValueError(f"status {self.status.kind!r} does not match board ({derived.kind!r})")

        x_count, o_count = self.board.count(Cell.X), self.board.count(Cell.O)
        to_move = Player.X if x_count == o_count else Player.O
        if isinstance(derived, InProgress):
            if self.current_player is not to_move:
                raise ValueError(f"{to_move.value} is to move on this board, not {self.current_player.value}")
            return self

        # Terminal: the last mover made the final move and keeps the turn marker.
        last_mover = to_move.opposite()
        if isinstance(derived, Won) and derived.player is not last_mover:
            raise ValueError(f"{derived.player.value} cannot have won after {last_mover.value} moved last")
        if self.current_player is not last_mover:
            raise ValueError(f"finished game must keep {last_mover.value} as current player")
        return self

    @property
    def is_over(self) -> bool:
        return is_terminal(self.status)

    @property
    def winner(self) -> Optional[Player]:
        return self.status.player if isinstance(self.status, Won) else None


# PUBLIC_INTERFACE
class InvalidMoveReason(str, Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    InvalidMoveReason.GAME_OVER: "Game is already over.",
    InvalidMoveReason.OUT_OF_RANGE: f"Cell index must be between 0 and {CELL_COUNT - 1}.",
    InvalidMoveReason.OCCUPIED: "Cell already taken.",
}


# PUBLIC_INTERFACE
class MoveOutcome(BaseModel):
    """Result of a move attempt; a rejected move carries the unchanged state."""
    model_config = ConfigDict(frozen=True)

    state: GameState
    accepted: bool
    reason: Optional[InvalidMoveReason] = None

    @property
    def message(self) -> Optional[str]:
        return self.reason.message if self.reason else None


# PUBLIC_INTERFACE
class CellView(BaseModel):
    """One rendered square."""
    index: int = Field(..., ge=0, le=CELL_COUNT - 1)
    value: Cell
    disabled: bool
    aria_label: str


# PUBLIC_INTERFACE
class BoardView(BaseModel):
    """Everything a presentation layer needs to draw the game screen."""
    cells: List[CellView]
    status_text: str
    show_restart: bool
    restart_label: str = "Restart Game"
    winning_line: Optional[Tuple[int, int, int]] = None
    theme: str
    theme_button_label: str
    theme_aria_label: str
