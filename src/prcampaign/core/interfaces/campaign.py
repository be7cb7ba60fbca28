from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

from prcampaign.core.models import Campaign


@runtime_checkable
class CampaignReaderProtocol(Protocol):
    """Source of the campaign being acted on."""

    def open_campaign(self, root: Optional[Union[str, Path]] = None) -> Campaign:
        """Load the campaign rooted at *root* (cwd when omitted)."""
        ...
