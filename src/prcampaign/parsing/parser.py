# prcampaign/parsing/parser.py
from __future__ import annotations

import argparse

from prcampaign.constants import DEFAULT_REPOS_FILE, TOOL_NAME


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Global flags (verbosity, log format, colors) precede the subcommand.
        - Action flags of `update-prs` are validated by the command itself so
          that an empty or ambiguous selection is reported as a configuration
          error rather than an argparse usage error.
    """
    p = argparse.ArgumentParser(
        prog=TOOL_NAME,
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            f"{TOOL_NAME} – run bulk actions across the repositories of a campaign\n"
            "The campaign is the current directory; its repositories are listed "
            f"in {DEFAULT_REPOS_FILE} and cloned under work/<owner>/<repo>."
        ),
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Print every external command before it runs (long arguments are summarized).",
    )
    p.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON lines (also enabled by PRCAMPAIGN_JSON_LOGS=1).",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        dest="no_color",
        help="Disable ANSI colors in summaries (also honored via NO_COLOR).",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    upd = sub.add_parser(
        "update-prs",
        help="update all PRs that have been generated by the campaign",
        description="Update all PRs that have been generated by the campaign.",
    )
    upd.add_argument(
        "--close",
        action="store_true",
        dest="close",
        help="Close all generated PRs",
    )
    upd.add_argument(
        "--yes",
        action="store_true",
        dest="yes",
        help="Skips the confirmation prompt",
    )
    upd.add_argument(
        "--repos",
        metavar="FILE",
        dest="repos_file",
        default=DEFAULT_REPOS_FILE,
        help=f"Repository list of the campaign (default: {DEFAULT_REPOS_FILE}).",
    )

    return p
