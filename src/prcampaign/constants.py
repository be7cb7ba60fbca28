from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Arguments longer than this are replaced in verbose command traces.
ARG_SUMMARY_LIMIT: int = 30
ARG_PLACEHOLDER: str = '...'

DEFAULT_REPOS_FILE: str = 'repos.txt'
WORK_DIR: str = 'work'

# Substring of `gh pr view` stderr when the branch has no pull request.
NO_PR_FOUND_MARKER: str = 'no pull requests found'

TOOL_NAME: str = 'prcampaign'
