"""CLI argument, exit-status, and color-selection tests.

Verifies how ``dirtree.cli.main`` maps flags onto traversal options.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pygments.console import ansiformat

from dirtree import cli


def _make_tree(root: Path) -> None:
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")
    (root / "main.py").write_text("print('hi')\n", encoding="utf-8")


class CliOutputTests(unittest.TestCase):
    def test_main_prints_tree_and_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout):
                cli.main([str(root)])

            self.assertEqual(
                stdout.getvalue(),
                f"{root}\n"
                "├── docs\n"
                "│   └── guide.md\n"
                "└── main.py\n"
                "\n"
                "1 directories, 2 files\n",
            )

    def test_main_defaults_to_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)
            stdout = io.StringIO()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["dirtree"]), mock.patch("sys.stdout", stdout):
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            lines = stdout.getvalue().splitlines()
            self.assertEqual(lines[0], ".")
            self.assertEqual(lines[-1], "1 directories, 2 files")

    def test_short_h_flag_selects_sizes_not_help(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("abc", encoding="utf-8")
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout):
                cli.main(["-h", str(root)])

            self.assertIn("└── [   3]  a.txt\n", stdout.getvalue())

    def test_combined_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout):
                cli.main(["-d", "-f", str(root)])

            self.assertEqual(
                stdout.getvalue(),
                f"{root}\n└── {root}{os.sep}docs\n\n1 directories\n",
            )

    def test_missing_directory_exits_with_status_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "nope")
            stdout = io.StringIO()

            with mock.patch("sys.stdout", stdout):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main([missing])

            self.assertEqual(exc_info.exception.code, 1)
            self.assertEqual(stdout.getvalue(), f"{missing} [error opening dir]\n\n0 directories, 0 files\n")

    def test_help_flag_exits_cleanly(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["--help"])

        self.assertEqual(exc_info.exception.code, 0)
        self.assertIn("List directories only.", stdout.getvalue())


class CliStreamTests(unittest.TestCase):
    def test_undecodable_filename_is_written_as_raw_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "good.txt").write_text("", encoding="utf-8")
            with open(os.path.join(os.fsencode(tmp), b"bad\xffname"), "wb"):
                pass
            raw = io.BytesIO()
            stdout = io.TextIOWrapper(raw, encoding="utf-8", errors="strict")

            with mock.patch("sys.stdout", stdout):
                cli.main([str(root)])

            self.assertEqual(
                raw.getvalue(),
                os.fsencode(tmp) + b"\n"
                + "├── ".encode("utf-8") + b"bad\xffname\n"
                + "└── ".encode("utf-8") + b"good.txt\n"
                + b"\n0 directories, 2 files\n",
            )

    def test_reader_closing_pipe_exits_without_traceback(self) -> None:
        class ClosedPipe(io.StringIO):
            def write(self, text: str) -> int:
                raise BrokenPipeError(32, "Broken pipe")

        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "a.txt").write_text("", encoding="utf-8")

            with mock.patch("sys.stdout", ClosedPipe()):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main([tmp])

        self.assertEqual(exc_info.exception.code, 1)

    def test_closed_pipe_is_redirected_to_devnull(self) -> None:
        stream = mock.Mock()
        stream.fileno.return_value = 7
        with (
            mock.patch("dirtree.cli.os.open", return_value=99) as open_fd,
            mock.patch("dirtree.cli.os.dup2") as dup2,
            mock.patch("dirtree.cli.os.close") as close_fd,
        ):
            cli._detach_closed_stream(stream)

        open_fd.assert_called_once_with(os.devnull, os.O_WRONLY)
        dup2.assert_called_once_with(99, 7)
        close_fd.assert_called_once_with(99)


class CliColorTests(unittest.TestCase):
    def test_colors_applied_on_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            stdout = io.StringIO()

            with (
                mock.patch.dict(os.environ, {"NO_COLOR": ""}),
                mock.patch("dirtree.cli._stream_is_tty", return_value=True),
                mock.patch("sys.stdout", stdout),
            ):
                cli.main([str(root)])

            lines = stdout.getvalue().splitlines()
            self.assertEqual(lines[0], ansiformat("*brightblue*", str(root)))
            self.assertEqual(lines[1], "└── " + ansiformat("*brightblue*", "sub"))

    def test_no_color_flag_and_environment_disable_styling(self) -> None:
        stream = io.StringIO()
        with mock.patch("dirtree.cli._stream_is_tty", return_value=True):
            with mock.patch.dict(os.environ, {"NO_COLOR": ""}):
                self.assertTrue(cli.should_colorize(stream, no_color=False))
                self.assertFalse(cli.should_colorize(stream, no_color=True))
            with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
                self.assertFalse(cli.should_colorize(stream, no_color=False))

    def test_non_terminal_stream_is_not_colorized(self) -> None:
        with mock.patch.dict(os.environ, {"NO_COLOR": ""}):
            self.assertFalse(cli.should_colorize(io.StringIO(), no_color=False))


if __name__ == "__main__":
    unittest.main()
