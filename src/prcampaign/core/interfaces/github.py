from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from prcampaign.core.interfaces.logging import OutputLikeProtocol
from prcampaign.core.models import ActionResult


@runtime_checkable
class GitHubProtocol(Protocol):
    """Pull-request operations performed inside a working copy."""

    def close_pull_request(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], branch_name: str
    ) -> ActionResult:
        """Close the open PR of *branch_name*; never raises for command failures."""
        ...
