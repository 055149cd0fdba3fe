"""CLI argument and default-path behavior tests."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirhop import cli


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("dirhop.cli.configure_logging")
        self.configure_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def test_main_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch("dirhop.cli.run_browser", return_value=0) as run_browser:
                    cli.main([])
            finally:
                os.chdir(previous_cwd)

        run_browser.assert_called_once()
        (path,) = run_browser.call_args.args
        self.assertEqual(path.resolve(), root)
        self.assertEqual(
            run_browser.call_args.kwargs,
            {"theme_name": None, "no_color": False, "output_file": None},
        )

    def test_main_passes_options_through(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch("dirhop.cli.run_browser", return_value=0) as run_browser:
                cli.main(
                    [str(root), "--theme", "ocean", "--no-color", "--output-file", "/tmp/dh.out", "--log-level", "debug"],
                    default_path=root / "unused",
                )

        self.assertEqual(run_browser.call_args.args, (root,))
        self.assertEqual(
            run_browser.call_args.kwargs,
            {"theme_name": "ocean", "no_color": True, "output_file": Path("/tmp/dh.out")},
        )
        self.configure_logging.assert_called_once_with("debug")

    def test_non_directory_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch("dirhop.cli.run_browser") as run_browser:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main([str(target)])

        run_browser.assert_not_called()
        self.assertIn("Not a directory", str(ctx.exception.code))

    def test_nonzero_browser_status_becomes_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirhop.cli.run_browser", return_value=130):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main([tmp])

        self.assertEqual(ctx.exception.code, 130)

    def test_init_prints_shell_wrapper_and_skips_browser(self) -> None:
        stdout = io.StringIO()
        with mock.patch("dirhop.cli.run_browser") as run_browser, mock.patch("sys.stdout", stdout):
            cli.main(["--init", "zsh"])

        run_browser.assert_not_called()
        self.configure_logging.assert_not_called()
        self.assertIn("dh() {", stdout.getvalue())
        self.assertIn("--output-file", stdout.getvalue())

    def test_set_theme_persists_choice_and_exits(self) -> None:
        with mock.patch("dirhop.cli.save_theme_name") as save_mock, mock.patch("dirhop.cli.run_browser") as run_browser:
            cli.main(["--set-theme", "ocean"])

        save_mock.assert_called_once_with("ocean")
        run_browser.assert_not_called()

    def test_unknown_theme_is_rejected(self) -> None:
        with mock.patch("dirhop.cli.run_browser") as run_browser, mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--theme", "oceann"])

        self.assertEqual(ctx.exception.code, 2)
        run_browser.assert_not_called()

    def test_init_rejects_unknown_shell(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--init", "tcsh"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
