from __future__ import annotations

"""Public surface for prcampaign.core.

Exposes the data model and the protocol types from a single import location:

    from prcampaign.core import Campaign, Repository, ExecutorProtocol, ...
"""

from prcampaign.core.interfaces import (
    ActivityProtocol,
    CampaignReaderProtocol,
    ExecutorProtocol,
    GitHubProtocol,
    LoggerLikeProtocol,
    OutputLikeProtocol,
    PromptProtocol,
)
from prcampaign.core.models import (
    ActionMode,
    ActionResult,
    ActionResultKind,
    Campaign,
    Outcome,
    OutcomeKind,
    Repository,
    RunSummary,
)

__all__ = [
    # Protocols
    "ActivityProtocol",
    "CampaignReaderProtocol",
    "ExecutorProtocol",
    "GitHubProtocol",
    "LoggerLikeProtocol",
    "OutputLikeProtocol",
    "PromptProtocol",
    # Models
    "ActionMode",
    "ActionResult",
    "ActionResultKind",
    "Campaign",
    "Outcome",
    "OutcomeKind",
    "Repository",
    "RunSummary",
]
