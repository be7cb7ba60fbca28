from __future__ import annotations

"""Subprocess runner used for every external tool invocation.

Two entry points are provided:
    - execute: stream merged stdout/stderr to an output sink while the
      process runs.
    - execute_and_capture: capture stdout and return it; on failure the
      captured stderr travels on the raised CommandError.

When verbose, each call first writes a trace line of the form
``Executing: <name> <args> in <dir>`` where overly long arguments are
summarized (see `summarized_args`). The real argument list is never altered.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from prcampaign.constants import ARG_PLACEHOLDER, ARG_SUMMARY_LIMIT
from prcampaign.core.interfaces.executor import ExecutorProtocol
from prcampaign.core.interfaces.logging import OutputLikeProtocol
from prcampaign.errors import CommandError
from prcampaign.logging.helpers import get_logger, trace_io


def summarized_args(args: Sequence[str]) -> List[str]:
    """Return *args* with every value longer than the limit replaced by a placeholder."""
    return [ARG_PLACEHOLDER if len(arg) > ARG_SUMMARY_LIMIT else arg for arg in args]


class RealExecutor(ExecutorProtocol):
    def __init__(self, *, verbose: bool = True, logger: Optional[logging.Logger] = None) -> None:
        self._verbose = bool(verbose)
        self._log = logger or get_logger('exec')

    @property
    def verbose(self) -> bool:
        return self._verbose

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = bool(verbose)

    def _trace(self, output: OutputLikeProtocol, working_dir: Union[str, Path], name: str, args: Sequence[str]) -> None:
        if not self._verbose:
            return
        parts = ['Executing:', name, *summarized_args(args), 'in', str(working_dir)]
        output.write(' '.join(parts) + '\n')

    def execute(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], name: str, *args: str
    ) -> None:
        cmd = [name, *args]
        self._trace(output, working_dir, name, args)
        trace_io(self._log, 'spawn (streaming)', cmd=[name, *summarized_args(args)], cwd=str(working_dir))

        try:
            proc = subprocess.Popen(
                cmd,
                cwd=str(working_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding='utf-8',
                errors='replace',
            )
        except OSError as exc:
            raise CommandError(f'could not start {name}: {exc}', cmd=cmd) from exc

        with proc:
            assert proc.stdout is not None
            for line in proc.stdout:
                output.write(line)
            returncode = proc.wait()

        if returncode != 0:
            raise CommandError(f'{name} exited with status {returncode}', cmd=cmd, returncode=returncode)

    def execute_and_capture(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], name: str, *args: str
    ) -> str:
        cmd = [name, *args]
        self._trace(output, working_dir, name, args)
        trace_io(self._log, 'spawn (capture)', cmd=[name, *summarized_args(args)], cwd=str(working_dir))

        try:
            completed = subprocess.run(
                cmd,
                cwd=str(working_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding='utf-8',
                errors='replace',
                check=False,
            )
        except OSError as exc:
            raise CommandError(f'could not start {name}: {exc}', cmd=cmd) from exc

        if completed.returncode != 0:
            stderr = completed.stderr or ''
            raise CommandError(
                f'error: exit status {completed.returncode}. Stderr: {stderr}',
                cmd=cmd,
                returncode=completed.returncode,
                stderr=stderr,
            )
        return completed.stdout or ''
