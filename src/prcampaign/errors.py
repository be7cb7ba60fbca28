from __future__ import annotations

"""Exception hierarchy shared by every prcampaign component."""

from typing import Optional, Sequence


class PrCampaignError(RuntimeError):
    """Base class for errors raised by prcampaign."""


class ConfigurationError(PrCampaignError):
    """Invalid or ambiguous command-line configuration."""


class CampaignError(PrCampaignError):
    """The campaign directory could not be read."""


class CommandError(PrCampaignError):
    """An external command failed to start or exited non-zero.

    Attributes:
        cmd: Full argument vector (program first).
        returncode: Exit status, or None when the process never started.
        stderr: Captured standard error ('' when it was streamed or unavailable).
    """

    def __init__(
        self,
        message: str,
        *,
        cmd: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = '',
    ) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
