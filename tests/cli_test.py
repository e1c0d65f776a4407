import unittest
from pathlib import Path
from unittest.mock import patch

from stackage_freeze.cli import build_parser, main
from stackage_freeze.errors import ResolverNotFoundError
from stackage_freeze.models import Stream


class TestCli(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["ghc", "8.6.3"])
        self.assertEqual(args.output_dir, ".")
        self.assertEqual(args.max_pages, 8)
        self.assertFalse(args.nightly)

    def test_rejects_zero_pages(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["ghc", "8.6.3", "--max-pages", "0"])

    @patch("stackage_freeze.cli.freeze_by_ghc_version", return_value=Path("out/cabal.project.freeze"))
    def test_ghc_command(self, mock_freeze):
        self.assertEqual(main(["ghc", "8.6.3", "-o", "out", "--max-pages", "3", "--nightly"]), 0)
        mock_freeze.assert_called_once_with("8.6.3", "out", max_pages=3, use_unstable=True)

    @patch("stackage_freeze.cli.freeze_by_resolver", return_value=Path("cabal.project.freeze"))
    def test_resolver_command(self, mock_freeze):
        self.assertEqual(main(["resolver", "lts-16.22"]), 0)
        mock_freeze.assert_called_once_with("lts-16.22", ".")

    @patch("stackage_freeze.cli.freeze_project", return_value=Path("cabal.project.freeze"))
    def test_project_command(self, mock_freeze):
        self.assertEqual(main(["project", "--start", "src"]), 0)
        mock_freeze.assert_called_once_with("src", max_pages=8, use_unstable=False)

    @patch("stackage_freeze.cli.freeze_by_ghc_version",
           side_effect=ResolverNotFoundError("8.6.3", 8, Stream.LTS))
    def test_freeze_error_exits_nonzero(self, mock_freeze):
        self.assertEqual(main(["ghc", "8.6.3"]), 1)

    @patch("stackage_freeze.cli.find_resolver", return_value=None)
    def test_locate_without_match(self, mock_find):
        self.assertEqual(main(["locate", "8.6.3"]), 1)

    @patch("stackage_freeze.cli.find_resolver", return_value="/lts-16.22")
    def test_locate_prints_url(self, mock_find):
        with patch("builtins.print") as mock_print:
            self.assertEqual(main(["locate", "8.6.3"]), 0)
        mock_print.assert_called_once_with("/lts-16.22")


if __name__ == "__main__":
    unittest.main()
