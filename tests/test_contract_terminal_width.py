from __future__ import annotations

import io
import os
import unittest
from unittest.mock import patch

from hourglass.util.console import TerminalSizeError, obs_enabled, terminal_width


class _FdStream(io.StringIO):
    def fileno(self) -> int:
        return 1


class TestTerminalWidthContract(unittest.TestCase):
    def test_columns_env_wins(self) -> None:
        with patch.dict(os.environ, {"COLUMNS": "77"}):
            self.assertEqual(terminal_width(io.StringIO()), 77)

    def test_queries_the_stream_terminal(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "COLUMNS"}
        with patch.dict(os.environ, env, clear=True), patch(
            "hourglass.util.console.os.get_terminal_size", return_value=os.terminal_size((91, 24))
        ) as gts:
            self.assertEqual(terminal_width(_FdStream()), 91)
        gts.assert_called_once_with(1)

    def test_invalid_columns_falls_through_to_terminal(self) -> None:
        with patch.dict(os.environ, {"COLUMNS": "wide"}), patch(
            "hourglass.util.console.os.get_terminal_size", return_value=os.terminal_size((64, 24))
        ):
            self.assertEqual(terminal_width(_FdStream()), 64)

    def test_no_terminal_raises(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "COLUMNS"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(TerminalSizeError):
                terminal_width(io.StringIO())
            with patch("hourglass.util.console.os.get_terminal_size", side_effect=OSError(25, "Inappropriate ioctl")):
                with self.assertRaises(TerminalSizeError):
                    terminal_width(_FdStream())


class TestObservabilityGateContract(unittest.TestCase):
    def test_obs_log_env_values(self) -> None:
        for raw, expected in (("1", True), ("yes", True), (" ON ", True), ("0", False), ("", False)):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"HOURGLASS_OBS_LOG": raw}):
                    self.assertIs(obs_enabled(), expected)


if __name__ == "__main__":
    unittest.main(verbosity=2)
