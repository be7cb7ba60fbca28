from __future__ import annotations

"""
Contract for the subprocess runner.

Implementations raise `prcampaign.errors.CommandError` when the program
cannot be started or exits non-zero.
"""

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from prcampaign.core.interfaces.logging import OutputLikeProtocol


@runtime_checkable
class ExecutorProtocol(Protocol):
    def execute(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], name: str, *args: str
    ) -> None:
        """Run *name* streaming merged stdout/stderr to *output*."""
        ...

    def execute_and_capture(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], name: str, *args: str
    ) -> str:
        """Run *name* and return its captured stdout."""
        ...

    def set_verbose(self, verbose: bool) -> None: ...
