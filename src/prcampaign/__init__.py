from __future__ import annotations

from prcampaign.cli import PrCampaign, main
from prcampaign.campaign.reader import CampaignReader
from prcampaign.commands.update_prs import UpdatePRsCommand, build_update_prs_command, only_one, validate_flags
from prcampaign.core.models import ActionMode, ActionResult, Campaign, Outcome, Repository, RunSummary
from prcampaign.engine.batch import BatchActionEngine
from prcampaign.errors import CampaignError, CommandError, ConfigurationError, PrCampaignError
from prcampaign.execution.executor import RealExecutor, summarized_args
from prcampaign.github.client import RealGitHub
from prcampaign.prompt.confirm import RealPrompt

__version__ = '0.1.0'

__all__ = [
    'PrCampaign',
    'main',
    'ActionMode',
    'ActionResult',
    'BatchActionEngine',
    'Campaign',
    'CampaignError',
    'CampaignReader',
    'CommandError',
    'ConfigurationError',
    'Outcome',
    'PrCampaignError',
    'RealExecutor',
    'RealGitHub',
    'RealPrompt',
    'Repository',
    'RunSummary',
    'UpdatePRsCommand',
    'build_update_prs_command',
    'only_one',
    'summarized_args',
    'validate_flags',
]
