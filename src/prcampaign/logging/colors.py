from __future__ import annotations

"""Styled fragments for console summaries, rendered through a rich Console.

The console decides whether styles survive: non-terminals, ``NO_COLOR`` and
``--no-color`` all yield plain text.
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text


class Palette:
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(color_system=None, highlight=False)

    @classmethod
    def plain(cls) -> 'Palette':
        return cls(Console(color_system=None, highlight=False))

    @classmethod
    def for_stream(cls, stream: Optional[TextIO], *, no_color: bool = False) -> 'Palette':
        # no_color=None lets rich read NO_COLOR from the environment
        return cls(Console(file=stream, no_color=True if no_color else None, highlight=False))

    @property
    def enabled(self) -> bool:
        return self.console.color_system is not None and not self.console.no_color

    def render(self, text: Text) -> str:
        if not self.enabled:
            return text.plain
        with self.console.capture() as capture:
            self.console.print(text, end='', soft_wrap=True)
        return capture.get()

    def styled(self, style: str, *parts) -> str:
        return self.render(Text(''.join(str(p) for p in parts), style=style))

    def green(self, *parts) -> str:
        return self.styled('green', *parts)

    def yellow(self, *parts) -> str:
        return self.styled('yellow', *parts)

    def red(self, *parts) -> str:
        return self.styled('red', *parts)
