from __future__ import annotations

"""Console activity reporting.

An `Activity` represents one step of work (e.g. "Closing PR in acme/api").
It is started once and ended exactly once with success, warning or failure.
Text written to `Activity.writer()` (command traces and tool output) is
forwarded line by line to the logger, indented under the activity.
"""

import io
import logging
from typing import Optional

from prcampaign.core.interfaces.logging import ActivityProtocol
from prcampaign.logging.helpers import get_logger


class ActivityWriter(io.TextIOBase):
    """Line-buffered text sink that logs every complete line."""

    def __init__(self, logger: logging.Logger, *, indent: str = '    ') -> None:
        super().__init__()
        self._log = logger
        self._indent = indent
        self._pending = ''

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self._pending += text
        *lines, self._pending = self._pending.split('\n')
        for line in lines:
            self._emit(line)
        return len(text)

    def flush(self) -> None:
        if self._pending:
            self._emit(self._pending)
            self._pending = ''

    def _emit(self, line: str) -> None:
        line = line.rstrip('\r')
        if line:
            self._log.info('%s%s', self._indent, line)


class Activity(ActivityProtocol):
    def __init__(self, name: str, *, logger: logging.Logger) -> None:
        self.name = name
        self._log = logger
        self._writer = ActivityWriter(logger)
        self._ended = False
        self._log.info('… %s', name)

    @property
    def ended(self) -> bool:
        return self._ended

    def writer(self) -> ActivityWriter:
        return self._writer

    def _finish(self) -> bool:
        if self._ended:
            self._log.debug('activity %r already ended', self.name)
            return False
        self._writer.flush()
        self._ended = True
        return True

    def end_with_success(self) -> None:
        if self._finish():
            self._log.info('✔ %s', self.name)

    def end_with_warning(self, message: str) -> None:
        if self._finish():
            self._log.warning('⚠  %s: %s', self.name, message)

    def end_with_failure(self, message: str) -> None:
        if self._finish():
            self._log.error('✖ %s: %s', self.name, message)


class ActivityLogger:
    """Logger facade that hands out activities and styled summary lines."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('activity')

    @property
    def logger(self) -> logging.Logger:
        return self._log

    def start_activity(self, name: str, *args) -> Activity:
        return Activity(name % args if args else name, logger=self._log)

    def successf(self, msg: str, *args) -> None:
        self._log.info('✔ ' + msg, *args)

    def warnf(self, msg: str, *args) -> None:
        self._log.warning('⚠  ' + msg, *args)

    def errorf(self, msg: str, *args) -> None:
        self._log.error('✖ ' + msg, *args)
