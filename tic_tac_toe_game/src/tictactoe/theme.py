from enum import Enum


# PUBLIC_INTERFACE
class Theme(str, Enum):
    """Light/dark display mode. Has no effect on game rules."""
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @property
    def button_label(self) -> str:
        """Label of the toggle button, naming the mode it switches to."""
        return "🌙 Dark" if self is Theme.LIGHT else "☀️ Light"

    @property
    def toggle_aria_label(self) -> str:
        return f"Switch to {self.toggled().value} mode"


DEFAULT_THEME = Theme.LIGHT
