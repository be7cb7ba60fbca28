from __future__ import annotations

"""Sequential per-repository batch engine.

Every repository of a campaign is processed exactly once, in campaign
order. Each one ends in exactly one of three outcomes:

    - done:    the action succeeded;
    - skipped: the working copy is missing, or the action reported that
               there was nothing to act on (no PR found);
    - errored: any other failure, including exceptions raised by the action.

A failure never stops the loop. After the last repository one aggregate
summary line is logged.
"""

from typing import Callable, Optional

from prcampaign.core.interfaces.logging import OutputLikeProtocol
from prcampaign.core.models import (
    ActionResult,
    ActionResultKind,
    Campaign,
    Outcome,
    OutcomeKind,
    Repository,
    RunSummary,
)
from prcampaign.logging.activity import Activity, ActivityLogger
from prcampaign.logging.colors import Palette

RepoAction = Callable[[Repository, OutputLikeProtocol], ActionResult]


def classify(result: ActionResult) -> Outcome:
    """Map a tagged action result onto a run outcome."""
    if result.kind is ActionResultKind.OK:
        return Outcome.done()
    if result.kind is ActionResultKind.NO_PR_FOUND:
        return Outcome.skipped(result.message)
    if result.kind is ActionResultKind.FAILED:
        return Outcome.errored(result.message)
    raise ValueError(f'unknown action result kind {result.kind!r}')


class BatchActionEngine:
    def __init__(self, *, activities: Optional[ActivityLogger] = None, palette: Optional[Palette] = None) -> None:
        self._activities = activities or ActivityLogger()
        self._palette = palette or Palette.plain()

    def process_repo(self, repo: Repository, action: RepoAction, activity: Activity) -> Outcome:
        path = repo.full_repo_path
        if not path.is_dir():
            return Outcome.skipped(f'Directory {path} does not exist - has it been cloned?')

        try:
            result = action(repo, activity.writer())
        except Exception as exc:
            self._activities.logger.debug('action raised for %s', repo.full_name, exc_info=True)
            return Outcome.errored(str(exc) or exc.__class__.__name__)
        return classify(result)

    @staticmethod
    def report(activity: Activity, outcome: Outcome) -> None:
        if outcome.kind is OutcomeKind.DONE:
            activity.end_with_success()
        elif outcome.kind is OutcomeKind.SKIPPED:
            activity.end_with_warning(outcome.message)
        else:
            activity.end_with_failure(outcome.message)

    def run(self, campaign: Campaign, action: RepoAction, *, op_name: str, describe: str) -> RunSummary:
        summary = RunSummary()
        for repo in campaign.repos:
            activity = self._activities.start_activity('%s in %s', describe, repo.full_name)
            outcome = self.process_repo(repo, action, activity)
            self.report(activity, outcome)
            summary.record(outcome)

        self.log_summary(op_name, summary)
        return summary

    def log_summary(self, op_name: str, summary: RunSummary) -> None:
        c = self._palette
        ok = c.green(summary.done_count, ' OK')
        skipped = c.yellow(summary.skipped_count, ' skipped')
        if not summary.has_errors:
            self._activities.successf('%s completed (%s, %s)', op_name, ok, skipped)
            return
        errored = c.red(summary.error_count, ' errored')
        self._activities.warnf(
            '%s completed with %s (%s, %s, %s)', op_name, c.red('errors'), ok, skipped, errored
        )
