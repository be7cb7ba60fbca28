from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from prcampaign.constants import WORK_DIR


@dataclass(frozen=True)
class Repository:
    """One target repository of a campaign, identified by `owner/repo`."""
    full_name: str
    root: Path = field(default_factory=Path.cwd, compare=False)
    host: Optional[str] = None

    @property
    def org_name(self) -> str:
        return self.full_name.split('/', 1)[0]

    @property
    def repo_name(self) -> str:
        return self.full_name.split('/', 1)[1]

    @property
    def full_repo_path(self) -> Path:
        """Expected location of the working copy."""
        return self.root / WORK_DIR / self.org_name / self.repo_name


@dataclass(frozen=True)
class Campaign:
    name: str
    repos: Tuple[Repository, ...] = ()


class ActionMode(Enum):
    """Mutually exclusive actions of `update-prs`."""
    CLOSE = 'close'


class ActionResultKind(Enum):
    OK = 'ok'
    NO_PR_FOUND = 'no_pr_found'
    FAILED = 'failed'


@dataclass(frozen=True)
class ActionResult:
    """Tagged result returned by a per-repository action."""
    kind: ActionResultKind
    message: str = ''

    @classmethod
    def ok(cls) -> 'ActionResult':
        return cls(ActionResultKind.OK)

    @classmethod
    def no_pr_found(cls, message: str) -> 'ActionResult':
        return cls(ActionResultKind.NO_PR_FOUND, message)

    @classmethod
    def failed(cls, message: str) -> 'ActionResult':
        return cls(ActionResultKind.FAILED, message)


class OutcomeKind(Enum):
    DONE = 'done'
    SKIPPED = 'skipped'
    ERRORED = 'errored'


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str = ''

    @classmethod
    def done(cls) -> 'Outcome':
        return cls(OutcomeKind.DONE)

    @classmethod
    def skipped(cls, reason: str) -> 'Outcome':
        return cls(OutcomeKind.SKIPPED, reason)

    @classmethod
    def errored(cls, cause: str) -> 'Outcome':
        return cls(OutcomeKind.ERRORED, cause)


@dataclass
class RunSummary:
    """Counters accumulated while a campaign is processed. Only ever incremented."""
    done_count: int = 0
    skipped_count: int = 0
    error_count: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.kind is OutcomeKind.DONE:
            self.done_count += 1
        elif outcome.kind is OutcomeKind.SKIPPED:
            self.skipped_count += 1
        else:
            self.error_count += 1

    @property
    def total(self) -> int:
        return self.done_count + self.skipped_count + self.error_count

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0
