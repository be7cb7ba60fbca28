from __future__ import annotations

import tempfile
import textwrap
import unittest
from pathlib import Path

from prcampaign.campaign.reader import CampaignReader
from prcampaign.errors import CampaignError
from prcampaign.logging.helpers import get_logger

LOGGER = "prcampaign.tests.campaign"


class CampaignReaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name) / "bump-deps"
        self.root.mkdir()
        self.reader = CampaignReader(logger=get_logger(LOGGER))

    def tearDown(self) -> None:
        self._td.cleanup()

    def _write(self, body: str, name: str = "repos.txt") -> None:
        (self.root / name).write_text(textwrap.dedent(body), encoding="utf-8")

    def test_name_order_and_paths(self) -> None:
        self._write(
            """
            # header comment
            acme/zeta

            acme/alpha   # trailing comment
            github.example.com/corp/svc
            """
        )
        camp = self.reader.open_campaign(self.root)
        self.assertEqual(camp.name, "bump-deps")
        self.assertEqual([r.full_name for r in camp.repos], ["acme/zeta", "acme/alpha", "corp/svc"])
        self.assertEqual(camp.repos[2].host, "github.example.com")
        self.assertIsNone(camp.repos[0].host)
        self.assertEqual(camp.repos[1].full_repo_path, self.root.resolve() / "work" / "acme" / "alpha")

    def test_duplicates_are_dropped_with_warning(self) -> None:
        self._write("acme/a\nacme/b\nacme/a\n")
        with self.assertLogs(LOGGER, level="WARNING") as cm:
            camp = self.reader.open_campaign(self.root)
        self.assertEqual([r.full_name for r in camp.repos], ["acme/a", "acme/b"])
        self.assertIn("duplicate repository acme/a", cm.output[0])

    def test_custom_repos_file(self) -> None:
        self._write("acme/only\n", name="subset.txt")
        camp = CampaignReader(repos_file="subset.txt").open_campaign(self.root)
        self.assertEqual([r.full_name for r in camp.repos], ["acme/only"])

    def test_missing_repos_file(self) -> None:
        with self.assertRaises(CampaignError):
            self.reader.open_campaign(self.root)

    def test_missing_directory(self) -> None:
        with self.assertRaises(CampaignError):
            self.reader.open_campaign(self.root / "nope")

    def test_malformed_line_names_line_number(self) -> None:
        self._write("acme/ok\njust-a-name\n")
        with self.assertRaises(CampaignError) as ctx:
            self.reader.open_campaign(self.root)
        self.assertIn("line 2", str(ctx.exception))

    def test_undecodable_repos_file(self) -> None:
        (self.root / "repos.txt").write_bytes(b"acme/a\n\xff\n")
        with self.assertRaises(CampaignError) as ctx:
            self.reader.open_campaign(self.root)
        self.assertIn("not valid UTF-8", str(ctx.exception))

    def test_empty_segments_are_rejected(self) -> None:
        for bad in ("acme/", "/repo", "a/b/c/d"):
            with self.subTest(line=bad):
                with self.assertRaises(CampaignError):
                    CampaignReader.parse_line(bad, self.root, 1)


if __name__ == "__main__":
    unittest.main()
