"""Form state behind the password generator UI.

Holds the current password, the show/hide flag and the slider length, and
turns button presses into calls to the core functions.
"""

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

import pyperclip

from passgen import (
    GenerationConfig,
    StrengthResult,
    evaluate_strength,
    generate_password,
)

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = 12
MASK_CHAR = "•"


@dataclass
class FormState:
    password: str = ""
    visible: bool = False
    length: int = DEFAULT_LENGTH


class Notification(NamedTuple):
    ok: bool
    message: str


def clamp_length(value: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(value)))


class PasswordForm:
    """One generator form and the state it owns.

    *clipboard* receives the password on copy and defaults to
    :func:`pyperclip.copy`.  *randbelow* is passed through to
    :func:`passgen.generate_password` when given.
    """

    def __init__(
        self,
        clipboard: Callable[[str], None] | None = None,
        randbelow: Callable[[int], int] | None = None,
        state: FormState | None = None,
    ) -> None:
        self.state = state or FormState()
        self._clipboard = clipboard or pyperclip.copy
        self._randbelow = randbelow

    def set_length(self, value: int) -> int:
        self.state.length = clamp_length(value)
        return self.state.length

    def generate(self) -> str:
        config = GenerationConfig(self.state.length)
        if self._randbelow is None:
            password = generate_password(config)
        else:
            password = generate_password(config, randbelow=self._randbelow)
        logger.debug("Generated a %d-character password", len(password))
        self.state.password = password
        return password

    def toggle_visibility(self) -> bool:
        self.state.visible = not self.state.visible
        return self.state.visible

    @property
    def strength(self) -> StrengthResult:
        return evaluate_strength(self.state.password)

    @property
    def displayed_password(self) -> str:
        if self.state.visible:
            return self.state.password
        return MASK_CHAR * len(self.state.password)

    def copy(self) -> Notification:
        """Hand the current password to the clipboard.

        Clipboard errors are reported in the returned notification; the form
        state is left as it was either way.
        """
        if not self.state.password:
            return Notification(False, "Generate a password first")

        try:
            self._clipboard(self.state.password)
        except Exception as exc:
            logger.warning("Clipboard copy failed: %s", exc)
            return Notification(False, f"Could not copy password: {exc}")

        return Notification(True, "Password copied to clipboard!")
