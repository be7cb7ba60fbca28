from __future__ import annotations

"""`update-prs` – act on every PR generated by the campaign.

Flow: validate mode flags → read campaign → confirm → batch engine.
Exactly one action flag must be given (only ``--close`` exists today).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from prcampaign.constants import DEFAULT_REPOS_FILE, TOOL_NAME
from prcampaign.core.interfaces.campaign import CampaignReaderProtocol
from prcampaign.core.interfaces.github import GitHubProtocol
from prcampaign.core.interfaces.logging import OutputLikeProtocol
from prcampaign.core.interfaces.prompt import PromptProtocol
from prcampaign.core.models import ActionMode, ActionResult, Campaign, Repository, RunSummary
from prcampaign.engine.batch import BatchActionEngine
from prcampaign.errors import CampaignError, ConfigurationError
from prcampaign.logging.activity import ActivityLogger
from prcampaign.logging.colors import Palette

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_CONFIG = 2


def only_one(*flags: bool) -> bool:
    """True when exactly one of *flags* is set."""
    return sum(1 for f in flags if f) == 1


def validate_flags(*mode_flags: bool) -> None:
    if not only_one(*mode_flags):
        raise ConfigurationError('update-prs needs one and only one action flag')


def select_mode(*, close: bool) -> ActionMode:
    """Validate the mode flags and return the selected mode."""
    validate_flags(close)
    return ActionMode.CLOSE


class UpdatePRsCommand:
    def __init__(
        self,
        *,
        github: GitHubProtocol,
        prompt: PromptProtocol,
        campaign_reader: CampaignReaderProtocol,
        activities: Optional[ActivityLogger] = None,
        palette: Optional[Palette] = None,
    ) -> None:
        self._gh = github
        self._prompt = prompt
        self._reader = campaign_reader
        self._activities = activities or ActivityLogger()
        self._engine = BatchActionEngine(activities=self._activities, palette=palette)

    @property
    def log(self) -> logging.Logger:
        return self._activities.logger

    def run(self, *, close: bool = False, yes: bool = False, root: Optional[Union[str, Path]] = None) -> int:
        """Run the command and return the process exit code."""
        try:
            mode = select_mode(close=close)
        except ConfigurationError as exc:
            self.log.error('Error while parsing the flags: %s', exc)
            return EXIT_CONFIG

        handlers = {ActionMode.CLOSE: self.run_close}
        return handlers[mode](yes=yes, root=root)

    def _read_campaign(self, root: Optional[Union[str, Path]]) -> Optional[Campaign]:
        activity = self._activities.start_activity('Reading campaign data')
        try:
            campaign = self._reader.open_campaign(root)
        except CampaignError as exc:
            activity.end_with_failure(str(exc))
            return None
        activity.end_with_success()
        return campaign

    def run_close(self, *, yes: bool = False, root: Optional[Union[str, Path]] = None) -> int:
        campaign = self._read_campaign(root)
        if campaign is None:
            return EXIT_ERRORS

        # TODO: include the number of open PRs that would be closed in the prompt.
        if not yes and not self._prompt.ask_confirm(f'Close all PRs from the {campaign.name} campaign?'):
            return EXIT_OK

        def close(repo: Repository, output: OutputLikeProtocol) -> ActionResult:
            return self._gh.close_pull_request(output, repo.full_repo_path, campaign.name)

        summary = self._engine.run(
            campaign, close, op_name=f'{TOOL_NAME} update-prs', describe='Closing PR'
        )
        return exit_code_for(summary)


def exit_code_for(summary: RunSummary) -> int:
    return EXIT_ERRORS if summary.has_errors else EXIT_OK


def build_update_prs_command(
    *,
    verbose: bool = False,
    repos_file: str = DEFAULT_REPOS_FILE,
    palette: Optional[Palette] = None,
    logger: Optional[logging.Logger] = None,
) -> UpdatePRsCommand:
    """Wire the command with the real executor, `gh` client, prompt and reader."""
    from prcampaign.campaign.reader import CampaignReader
    from prcampaign.execution.executor import RealExecutor
    from prcampaign.github.client import RealGitHub
    from prcampaign.prompt.confirm import RealPrompt

    executor = RealExecutor(logger=logger)
    executor.set_verbose(verbose)
    return UpdatePRsCommand(
        github=RealGitHub(executor, logger=logger),
        prompt=RealPrompt(),
        campaign_reader=CampaignReader(repos_file=repos_file, logger=logger),
        activities=ActivityLogger(logger),
        palette=palette,
    )
