from __future__ import annotations

from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse

from prcampaign.core.interfaces.prompt import PromptProtocol

_YES = frozenset({'y', 'yes'})
_NO = frozenset({'n', 'no'})


class YesNoConfirm(Confirm):
    """Confirm that also accepts "yes"/"no"; an empty answer declines."""

    def process_response(self, value: str) -> bool:
        answer = value.strip().lower()
        if answer in _YES:
            return True
        if not answer or answer in _NO:
            return False
        raise InvalidResponse(self.validate_error_message)


class RealPrompt(PromptProtocol):
    """Ask yes/no questions on the terminal. EOF counts as "no"."""

    def __init__(self, *, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> None:
        self._console = console
        self._stream = stream

    def ask_confirm(self, prompt: str) -> bool:
        return YesNoConfirm.ask(
            f'[bold]{prompt}[/]',
            console=self._console,
            default=False,
            stream=self._stream,
        )
