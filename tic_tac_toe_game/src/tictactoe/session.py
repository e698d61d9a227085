from typing import Callable, List

from .core import available_moves, restart, try_move, winning_line
from .logging_setup import get_logger
from .models import (
    BoardView,
    Cell,
    CellView,
    Draw,
    GameState,
    MoveOutcome,
    Won,
)
from .theme import DEFAULT_THEME, Theme

logger = get_logger(__name__)

Subscriber = Callable[[BoardView], None]


# PUBLIC_INTERFACE
def status_text(state: GameState) -> str:
    """Status line shown under the board."""
    if isinstance(state.status, Won):
        return f"Winner: {state.status.player.value}!"
    if isinstance(state.status, Draw):
        return "It's a draw!"
    return f"Next turn: {state.current_player.value}"


def _aria_label(cell: Cell) -> str:
    return f"Tic tac toe square {cell.value or 'empty'}"


# PUBLIC_INTERFACE
class GameSession:
    """One playthrough: owns a single GameState and the display theme.

    The presentation layer forwards clicks here and re-renders from view(),
    either by polling or by subscribing to change notifications.
    """

    def __init__(self, theme: Theme = DEFAULT_THEME):
        self._state: GameState = restart()
        self._theme: Theme = theme
        self._subscribers: List[Subscriber] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def theme(self) -> Theme:
        return self._theme

    # PUBLIC_INTERFACE
    def click(self, index: int) -> MoveOutcome:
        """Play the current player's symbol at index. Rejected clicks change nothing."""
        outcome = try_move(self._state, index)
        if not outcome.accepted:
            logger.debug("Ignoring click at %r: %s", index, outcome.message)
            return outcome
        self._state = outcome.state
        if self._state.is_over:
            logger.info("Game over: %s", status_text(self._state))
        self._notify()
        return outcome

    # PUBLIC_INTERFACE
    def restart(self) -> GameState:
        """Start a new game, keeping the theme."""
        self._state = restart()
        logger.info("Game restarted")
        self._notify()
        return self._state

    # PUBLIC_INTERFACE
    def toggle_theme(self) -> Theme:
        self._theme = self._theme.toggled()
        logger.info("Theme switched to %s", self._theme.value)
        self._notify()
        return self._theme

    # PUBLIC_INTERFACE
    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a re-render callback. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # PUBLIC_INTERFACE
    def view(self) -> BoardView:
        """Snapshot of everything needed to draw the screen."""
        state = self._state
        playable = set(available_moves(state))
        cells = [
            CellView(
                index=i,
                value=cell,
                disabled=i not in playable,
                aria_label=_aria_label(cell),
            )
            for i, cell in enumerate(state.board)
        ]
        return BoardView(
            cells=cells,
            status_text=status_text(state),
            show_restart=state.is_over,
            winning_line=winning_line(state.board),
            theme=self._theme.value,
            theme_button_label=self._theme.button_label,
            theme_aria_label=self._theme.toggle_aria_label,
        )

    def _notify(self) -> None:
        if not self._subscribers:
            return
        snapshot = self.view()
        for callback in list(self._subscribers):
            callback(snapshot)
