import os
import tempfile
import textwrap
import unittest
from unittest.mock import patch

import charkit.cli as cli
from charkit.lib import chars
from charkit.lib.config import Config
from charkit.lib.logger import Logger


class TestCLI(unittest.TestCase):
    def setUp(self):
        fd, path = tempfile.mkstemp(prefix="charkit_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(
                textwrap.dedent(
                    """
                    [generator]
                    charset = numeric
                    length = 6
                    count = 2

                    [dev]
                    log_level = debug
                    stack_trace_errors = false
                """
                ).lstrip()
            )

        self.path = path
        Config.load(self.path)
        Logger.setup(Logger.DEBUG)
        Logger._logger.handlers.clear()  # Silence std logs

    def tearDown(self):
        if os.path.exists(self.path):
            os.remove(self.path)

    def _run(self, *args: str) -> int:
        parser = cli._build_parser()
        ns = parser.parse_args(list(args))
        return ns.handler(ns)

    def _printed(self, mock_print) -> list[str]:
        return [call.args[0] for call in mock_print.call_args_list]

    def test_parse_length(self):
        self.assertEqual(cli._parse_length("8"), 8)
        self.assertEqual(cli._parse_length("8-12"), (8, 12))
        self.assertEqual(cli._parse_length(" 3-3 "), (3, 3))

        for bad in ("", "abc", "1-", "-3", "1-2-3"):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    cli._parse_length(bad)

    def test_version_command(self):
        with patch("builtins.print") as mock_print:
            rc = self._run("version")
        self.assertEqual(rc, 0)
        mock_print.assert_called_once_with(cli.__version__)

    def test_charsets_command(self):
        with patch("builtins.print") as mock_print:
            rc = self._run("charsets")

        self.assertEqual(rc, 0)
        lines = self._printed(mock_print)
        self.assertEqual(len(lines), len(chars.names()))
        self.assertTrue(lines[0].startswith("numeric"))
        self.assertTrue(lines[0].endswith("10"))

    def test_random_uses_config_defaults(self):
        with patch("builtins.print") as mock_print:
            rc = self._run("random")

        self.assertEqual(rc, 0)
        lines = self._printed(mock_print)
        self.assertEqual(len(lines), 2)
        for line in lines:
            self.assertEqual(len(line), 6)
            self.assertTrue(line.isdigit())

    def test_random_with_options(self):
        with patch("builtins.print") as mock_print:
            rc = self._run("random", "-c", "lowercase_alpha", "--chars", "!", "-l", "3-5", "-n", "20", "--seed", "7")

        self.assertEqual(rc, 0)
        lines = self._printed(mock_print)
        self.assertEqual(len(lines), 20)
        allowed = set(chars.LOWERCASE_ALPHA) | {"!"}
        for line in lines:
            self.assertTrue(3 <= len(line) <= 5)
            self.assertTrue(set(line) <= allowed)

    def test_random_seed_is_reproducible(self):
        outputs = []
        for _ in range(2):
            with patch("builtins.print") as mock_print:
                self._run("random", "-c", "alpha", "-l", "16", "-n", "3", "--seed", "1337")
            outputs.append(self._printed(mock_print))

        self.assertEqual(outputs[0], outputs[1])

    def test_random_literal_chars_only(self):
        with patch("builtins.print") as mock_print:
            rc = self._run("random", "--chars", "xy", "-l", "10", "-n", "1")

        self.assertEqual(rc, 0)
        self.assertTrue(set(self._printed(mock_print)[0]) <= {"x", "y"})

    def test_random_unknown_charset(self):
        with (
            self.assertLogs(Logger._logger.name, level="ERROR") as cm,
            patch("builtins.print") as mock_print,
        ):
            rc = self._run("random", "-c", "klingon")

        self.assertEqual(rc, 1)
        mock_print.assert_not_called()
        self.assertTrue(any("Unknown character set 'klingon'" in line for line in cm.output))

    def test_random_invalid_length(self):
        with self.assertLogs(Logger._logger.name, level="ERROR") as cm:
            rc = self._run("random", "-l", "many")

        self.assertEqual(rc, 1)
        self.assertTrue(any("Invalid length 'many'" in line for line in cm.output))

    def test_random_empty_length_range(self):
        with self.assertLogs(Logger._logger.name, level="ERROR") as cm:
            rc = self._run("random", "-l", "5-2")

        self.assertEqual(rc, 1)
        self.assertTrue(any("is empty" in line for line in cm.output))

    def test_random_raises_with_stack_trace_errors(self):
        with patch.object(Config, "get", side_effect=lambda s, k, d=None: True if k == "stack_trace_errors" else d):
            with self.assertRaises(KeyError):
                self._run("random", "-c", "klingon", "-l", "4", "-n", "1")

    def test_check_passes(self):
        with self.assertLogs(Logger._logger.name, level="SUCCESS") as cm:
            rc = self._run("check", "-c", "hexadecimal", "deadBEEF")

        self.assertEqual(rc, 0)
        self.assertTrue(any("All characters are in the set." in line for line in cm.output))

    def test_check_fails(self):
        with self.assertLogs(Logger._logger.name, level="ERROR") as cm:
            rc = self._run("check", "-c", "numeric", "12a4b")

        self.assertEqual(rc, 1)
        self.assertTrue(any("'ab'" in line for line in cm.output))

    def test_main_runs_version(self):
        with patch("sys.argv", ["charkit", "--config", self.path, "version"]), patch("builtins.print") as mock_print:
            rc = cli.main()
        self.assertEqual(rc, 0)
        mock_print.assert_called_once_with(cli.__version__)

    def test_main_runs_random(self):
        with patch("builtins.print") as mock_print:
            rc = cli.main(["--config", self.path, "random", "-n", "4", "--seed", "3"])

        self.assertEqual(rc, 0)
        self.assertEqual(len(self._printed(mock_print)), 4)


if __name__ == "__main__":
    unittest.main()
