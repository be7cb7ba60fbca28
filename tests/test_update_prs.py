from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from prcampaign.campaign.reader import CampaignReader
from prcampaign.commands.update_prs import (
    EXIT_CONFIG,
    EXIT_ERRORS,
    EXIT_OK,
    UpdatePRsCommand,
    only_one,
    select_mode,
    validate_flags,
)
from prcampaign.core.models import ActionMode, ActionResult
from prcampaign.errors import ConfigurationError
from prcampaign.logging.activity import ActivityLogger
from prcampaign.logging.helpers import get_logger

LOGGER = "prcampaign.tests.update_prs"


class ModeValidationTests(unittest.TestCase):
    def test_only_one(self) -> None:
        self.assertTrue(only_one(True))
        self.assertTrue(only_one(False, True, False))
        self.assertFalse(only_one())
        self.assertFalse(only_one(False))
        self.assertFalse(only_one(False, False, False))
        self.assertFalse(only_one(True, True))
        self.assertFalse(only_one(True, False, True))

    def test_validate_flags(self) -> None:
        validate_flags(True)
        validate_flags(False, True)
        for flags in [(), (False,), (True, True), (False, False)]:
            with self.subTest(flags=flags):
                with self.assertRaises(ConfigurationError):
                    validate_flags(*flags)

    def test_select_mode(self) -> None:
        self.assertIs(select_mode(close=True), ActionMode.CLOSE)
        with self.assertRaises(ConfigurationError):
            select_mode(close=False)


class UpdatePRsCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name) / "rename-foo"
        self.root.mkdir()
        (self.root / "repos.txt").write_text("acme/A\nacme/B\nacme/C\n", encoding="utf-8")
        for name in ("B", "C"):
            (self.root / "work" / "acme" / name).mkdir(parents=True)

        self.github = mock.Mock()
        self.github.close_pull_request.side_effect = self._close
        self.prompt = mock.Mock()
        self.prompt.ask_confirm.return_value = True
        self.cmd = UpdatePRsCommand(
            github=self.github,
            prompt=self.prompt,
            campaign_reader=CampaignReader(),
            activities=ActivityLogger(get_logger(LOGGER)),
        )

    def tearDown(self) -> None:
        self._td.cleanup()

    @staticmethod
    def _close(output, working_dir, branch_name) -> ActionResult:
        if Path(working_dir).name == "C":
            return ActionResult.failed("generic failure")
        return ActionResult.ok()

    def test_invalid_flags_abort_before_any_side_effect(self) -> None:
        reader = mock.Mock()
        cmd = UpdatePRsCommand(
            github=self.github,
            prompt=self.prompt,
            campaign_reader=reader,
            activities=ActivityLogger(get_logger(LOGGER)),
        )
        with self.assertLogs(LOGGER, level="ERROR") as cm:
            code = cmd.run(close=False, yes=False, root=self.root)
        self.assertEqual(code, EXIT_CONFIG)
        self.assertIn("one and only one action flag", cm.output[0])
        reader.open_campaign.assert_not_called()
        self.prompt.ask_confirm.assert_not_called()
        self.github.close_pull_request.assert_not_called()

    def test_confirmation_prompt_names_campaign(self) -> None:
        with self.assertLogs(LOGGER, level="INFO"):
            self.cmd.run(close=True, yes=False, root=self.root)
        self.prompt.ask_confirm.assert_called_once_with("Close all PRs from the rename-foo campaign?")

    def test_yes_bypasses_prompt(self) -> None:
        with self.assertLogs(LOGGER, level="INFO"):
            self.cmd.run(close=True, yes=True, root=self.root)
        self.prompt.ask_confirm.assert_not_called()
        self.assertEqual(self.github.close_pull_request.call_count, 2)

    def test_declined_prompt_is_silent_noop(self) -> None:
        self.prompt.ask_confirm.return_value = False
        with self.assertLogs(LOGGER, level="INFO") as cm:
            code = self.cmd.run(close=True, yes=False, root=self.root)
        self.assertEqual(code, EXIT_OK)
        self.github.close_pull_request.assert_not_called()
        self.assertFalse(any("completed" in r.getMessage() for r in cm.records))

    def test_mixed_campaign_counts_and_exit_code(self) -> None:
        with self.assertLogs(LOGGER, level="INFO") as cm:
            code = self.cmd.run(close=True, yes=True, root=self.root)
        self.assertEqual(code, EXIT_ERRORS)
        last = cm.records[-1]
        self.assertEqual(last.levelname, "WARNING")
        self.assertIn("(1 OK, 1 skipped, 1 errored)", last.getMessage())

        called_dirs = [Path(c.args[1]) for c in self.github.close_pull_request.call_args_list]
        self.assertEqual(called_dirs, [self.root.resolve() / "work" / "acme" / n for n in ("B", "C")])
        for c in self.github.close_pull_request.call_args_list:
            self.assertEqual(c.args[2], "rename-foo")

    def test_clean_run_exits_zero(self) -> None:
        self.github.close_pull_request.side_effect = None
        self.github.close_pull_request.return_value = ActionResult.no_pr_found("no PR found")
        with self.assertLogs(LOGGER, level="INFO") as cm:
            code = self.cmd.run(close=True, yes=True, root=self.root)
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(cm.records[-1].getMessage(), "✔ prcampaign update-prs completed (0 OK, 3 skipped)")

    def test_unreadable_campaign_fails_before_prompt(self) -> None:
        (self.root / "repos.txt").unlink()
        with self.assertLogs(LOGGER, level="INFO") as cm:
            code = self.cmd.run(close=True, yes=False, root=self.root)
        self.assertEqual(code, EXIT_ERRORS)
        self.prompt.ask_confirm.assert_not_called()
        self.assertTrue(any(r.levelname == "ERROR" and "Reading campaign data" in r.getMessage() for r in cm.records))


if __name__ == "__main__":
    unittest.main()
