from __future__ import annotations

"""Campaign directory reader.

A campaign is the current directory: its base name is the campaign name
and its repo file (``repos.txt`` by default) lists one repository per line::

    # comments and blank lines are ignored
    acme/service-a
    github.example.com/acme/service-b   # optional host prefix
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from prcampaign.constants import DEFAULT_REPOS_FILE
from prcampaign.core.interfaces.campaign import CampaignReaderProtocol
from prcampaign.core.models import Campaign, Repository
from prcampaign.errors import CampaignError
from prcampaign.logging.helpers import get_logger


class CampaignReader(CampaignReaderProtocol):
    def __init__(self, *, repos_file: str = DEFAULT_REPOS_FILE, logger: Optional[logging.Logger] = None) -> None:
        self._repos_file = repos_file
        self._log = logger or get_logger('campaign')

    @staticmethod
    def parse_line(line: str, root: Path, lineno: int) -> Optional[Repository]:
        """Parse one repo-file line; returns None for blanks and comments."""
        text = line.split('#', 1)[0].strip()
        if not text:
            return None

        segs = text.split('/')
        if len(segs) == 2:
            host = None
        elif len(segs) == 3:
            host, segs = segs[0], segs[1:]
        else:
            raise CampaignError(f'line {lineno}: invalid repository {text!r} (expected owner/repo)')

        if not all(segs) or (host is not None and not host):
            raise CampaignError(f'line {lineno}: invalid repository {text!r} (expected owner/repo)')

        return Repository(full_name='/'.join(segs), root=root, host=host)

    def read_repos(self, root: Path) -> List[Repository]:
        path = root / self._repos_file
        try:
            lines = path.read_text(encoding='utf-8').splitlines()
        except UnicodeDecodeError as exc:
            raise CampaignError(f'{path} is not valid UTF-8: {exc}') from exc
        except FileNotFoundError as exc:
            raise CampaignError(f'repository file {path} not found') from exc
        except OSError as exc:
            raise CampaignError(f'could not read {path}: {exc}') from exc

        repos: List[Repository] = []
        seen: set[str] = set()
        for lineno, line in enumerate(lines, start=1):
            repo = self.parse_line(line, root, lineno)
            if repo is None:
                continue
            if repo.full_name in seen:
                self._log.warning('⚠  duplicate repository %s in %s – ignored', repo.full_name, path.name)
                continue
            seen.add(repo.full_name)
            repos.append(repo)
        return repos

    def open_campaign(self, root: Optional[Union[str, Path]] = None) -> Campaign:
        base = Path(root).resolve() if root is not None else Path.cwd().resolve()
        if not base.is_dir():
            raise CampaignError(f'campaign directory {base} does not exist')
        return Campaign(name=base.name, repos=tuple(self.read_repos(base)))
