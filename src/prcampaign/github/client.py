from __future__ import annotations

"""Pull-request operations backed by the `gh` command-line tool.

Command failures never escape this module: they are converted into tagged
`ActionResult` values so that callers can tell "nothing to close" apart
from real errors without inspecting exception types.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from prcampaign.constants import NO_PR_FOUND_MARKER
from prcampaign.core.interfaces.executor import ExecutorProtocol
from prcampaign.core.interfaces.github import GitHubProtocol
from prcampaign.core.interfaces.logging import OutputLikeProtocol
from prcampaign.core.models import ActionResult
from prcampaign.errors import CommandError
from prcampaign.logging.helpers import get_logger

GH = 'gh'
_PR_FIELDS = 'url,number,state,title'
_OPEN_STATE = 'OPEN'


@dataclass(frozen=True)
class PullRequest:
    url: str
    number: int
    state: str
    title: str = ''

    @property
    def is_open(self) -> bool:
        return self.state.upper() == _OPEN_STATE


class RealGitHub(GitHubProtocol):
    def __init__(self, executor: ExecutorProtocol, *, logger: Optional[logging.Logger] = None) -> None:
        self._exec = executor
        self._log = logger or get_logger('github')

    @staticmethod
    def _is_no_pr_found(exc: CommandError) -> bool:
        return NO_PR_FOUND_MARKER in (exc.stderr or '').lower()

    @staticmethod
    def _parse_pr(raw: str) -> PullRequest:
        data = json.loads(raw)
        return PullRequest(
            url=str(data['url']),
            number=int(data['number']),
            state=str(data.get('state', '')),
            title=str(data.get('title', '')),
        )

    def close_pull_request(
        self, output: OutputLikeProtocol, working_dir: Union[str, Path], branch_name: str
    ) -> ActionResult:
        try:
            raw = self._exec.execute_and_capture(
                output, working_dir, GH, 'pr', 'view', branch_name, '--json', _PR_FIELDS
            )
        except CommandError as exc:
            if self._is_no_pr_found(exc):
                return ActionResult.no_pr_found(
                    f'no PR found for {working_dir} and branch {branch_name}'
                )
            return ActionResult.failed(str(exc))

        try:
            pr = self._parse_pr(raw)
        except (ValueError, KeyError, TypeError) as exc:
            return ActionResult.failed(f'unexpected output from gh pr view: {exc}')

        if not pr.is_open:
            return ActionResult.no_pr_found(
                f'PR #{pr.number} for branch {branch_name} is already {pr.state.lower()}'
            )

        self._log.debug('closing PR #%s (%s)', pr.number, pr.url)
        try:
            self._exec.execute(output, working_dir, GH, 'pr', 'close', pr.url)
        except CommandError as exc:
            return ActionResult.failed(str(exc))
        return ActionResult.ok()
