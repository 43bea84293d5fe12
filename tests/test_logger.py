import io
import logging
import unittest

from colorama import Fore, Style

from charkit.lib.logger import Logger


class TestLogger(unittest.TestCase):
    def setUp(self):
        Logger._logger = None
        Logger.setup(logging.DEBUG)

        self.stream = io.StringIO()
        handler = Logger._logger.handlers[0]
        handler.stream = self.stream

    def _read_stream(self) -> str:
        """Flush and read the captured stream."""

        for h in Logger._logger.handlers:
            h.flush()
        return self.stream.getvalue()

    def test_setup(self):
        self.assertEqual(Logger._logger.name, "charkit")
        self.assertEqual(Logger._logger.level, logging.DEBUG)

        handlers = Logger._logger.handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.StreamHandler)
        self.assertEqual(handlers[0].formatter._fmt, "%(message)s")

        self.assertEqual(logging.getLevelName(Logger.SUCCESS), "SUCCESS")

    def test_setup_is_idempotent(self):
        Logger.setup(Logger.INFO)
        self.assertEqual(len(Logger._logger.handlers), 1)

    def test_lazy_setup(self):
        Logger._logger = None
        Logger.info("first message")
        self.assertIsNotNone(Logger._logger)

    def test_set_level(self):
        Logger.set_level(Logger.INFO)
        self.assertEqual(Logger._logger.level, logging.INFO)

    def test_log_success(self):
        Logger.success("Generated 3 strings")
        out = self._read_stream()

        self.assertEqual(out, f"{Fore.GREEN}{Style.BRIGHT}[+]{Style.RESET_ALL} Generated 3 strings\n")

    def test_log_info(self):
        Logger.info("Informational log")
        out = self._read_stream()

        self.assertEqual(out, f"{Fore.BLUE}{Style.BRIGHT}[*]{Style.RESET_ALL} Informational log\n")

    def test_log_warning(self):
        Logger.warning("Be careful!")
        out = self._read_stream()

        self.assertEqual(out, f"{Fore.YELLOW}{Style.BRIGHT}[!]{Style.RESET_ALL} Be careful!\n")

    def test_log_error(self):
        Logger.error("Unknown character set")
        out = self._read_stream()

        self.assertEqual(out, f"{Fore.RED}{Style.BRIGHT}[-]{Style.RESET_ALL} Unknown character set\n")

    def test_log_debug(self):
        Logger.debug("Verbose information here")
        out = self._read_stream()

        self.assertEqual(out, f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL} Verbose information here\n")

    def test_filtered_log(self):
        Logger.set_level("INFO")

        Logger.debug("This log should be filtered")
        out = self._read_stream()

        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
