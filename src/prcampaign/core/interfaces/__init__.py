from .campaign import CampaignReaderProtocol
from .executor import ExecutorProtocol
from .github import GitHubProtocol
from .logging import ActivityProtocol, LoggerFactoryProtocol, LoggerLikeProtocol, OutputLikeProtocol
from .prompt import PromptProtocol

__all__ = [
    'ActivityProtocol',
    'CampaignReaderProtocol',
    'ExecutorProtocol',
    'GitHubProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'OutputLikeProtocol',
    'PromptProtocol',
]
