import os
import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest import mock

from newsboat_summarize import installer
from newsboat_summarize.installer import InstallPaths
from newsboat_summarize.types import InstallError


class InstallerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.home = Path(tmpdir.name)
        self.paths = InstallPaths.from_home(self.home)
        patcher = mock.patch.object(installer, "check_dependencies", return_value=[])
        self.check_dependencies = patcher.start()
        self.addCleanup(patcher.stop)

    def install(self, platform: str = "linux") -> None:
        installer.install(self.paths, platform=platform, python="/usr/bin/python3")

    def newsboat_lines(self) -> list[str]:
        return self.paths.newsboat_config.read_text(encoding="utf-8").splitlines()

    def write_newsboat_config(self, text: str) -> None:
        self.paths.newsboat_config.parent.mkdir(parents=True)
        self.paths.newsboat_config.write_text(text, encoding="utf-8")


class InstallTest(InstallerTestCase):
    def test_install_fresh_home_on_linux(self) -> None:
        self.install(platform="linux")

        script = self.paths.script.read_text(encoding="utf-8")
        self.assertIn("exec /usr/bin/python3 -m newsboat_summarize.cli", script)
        self.assertTrue(os.access(self.paths.script, os.X_OK))
        self.assertIn(
            'BROWSER_CMD="xdg-open"', self.paths.config.read_text(encoding="utf-8")
        )
        self.assertEqual(
            self.newsboat_lines(),
            [
                "browser xdg-open",
                f'macro m set browser "{self.paths.script}" ; '
                "open-in-browser ; set browser xdg-open",
            ],
        )

    def test_install_checks_dependencies_in_install_home(self) -> None:
        self.install()

        self.check_dependencies.assert_called_once_with(self.home)

    def test_install_keeps_user_config_and_browser(self) -> None:
        self.write_newsboat_config("browser firefox\nbind-key j down\n")

        self.install(platform="darwin")

        lines = self.newsboat_lines()
        self.assertEqual(lines[:2], ["browser firefox", "bind-key j down"])
        self.assertTrue(lines[2].endswith("; open-in-browser ; set browser firefox"))
        backups = list(self.paths.newsboat_config.parent.glob("config.backup.*"))
        self.assertEqual(len(backups), 1)
        self.assertEqual(
            backups[0].read_text(encoding="utf-8"), "browser firefox\nbind-key j down\n"
        )
        self.assertIn('BROWSER_CMD="open"', self.paths.config.read_text(encoding="utf-8"))

    def test_install_is_idempotent(self) -> None:
        self.install()
        self.paths.config.write_text('PROVIDER="grok"\n', encoding="utf-8")

        self.install()

        macros = [line for line in self.newsboat_lines() if line.startswith("macro m")]
        self.assertEqual(len(macros), 1)
        self.assertEqual(
            [line for line in self.newsboat_lines() if line.startswith("browser")],
            ["browser xdg-open"],
        )
        self.assertEqual(
            self.paths.config.read_text(encoding="utf-8"), 'PROVIDER="grok"\n'
        )

    def test_backup_name_uses_timestamp(self) -> None:
        self.write_newsboat_config("bind-key j down\n")

        backup = installer.backup_newsboat_config(
            self.paths, now=datetime(2024, 3, 5, 7, 8, 9)
        )

        self.assertEqual(backup.name, "config.backup.20240305_070809")
        self.assertIsNone(
            installer.backup_newsboat_config(InstallPaths.from_home(self.home / "x"))
        )


class UninstallTest(InstallerTestCase):
    def test_uninstall_removes_macro_and_files(self) -> None:
        self.write_newsboat_config("browser firefox\nbind-key j down\n")
        self.install()
        debug_log = self.home / "newsboat-debug.log"
        debug_log.write_text("debug", encoding="utf-8")

        removed = installer.uninstall(
            self.paths, confirm=lambda prompt: "yes", extra=(debug_log,)
        )

        self.assertEqual(removed, 3)
        self.assertEqual(self.newsboat_lines(), ["browser firefox", "bind-key j down"])
        self.assertFalse(self.paths.script.exists())
        self.assertFalse(self.paths.config.exists())
        self.assertFalse(debug_log.exists())

    def test_uninstall_can_be_cancelled(self) -> None:
        self.install()

        removed = installer.uninstall(self.paths, confirm=lambda prompt: "n", extra=())

        self.assertEqual(removed, 0)
        self.assertTrue(self.paths.script.exists())
        self.assertTrue(any("newsboat-summarize" in line for line in self.newsboat_lines()))

    def test_uninstall_without_installation(self) -> None:
        removed = installer.uninstall(self.paths, confirm=lambda prompt: "y", extra=())

        self.assertEqual(removed, 0)
        self.assertFalse(self.paths.newsboat_config.exists())


class EntryPointTest(InstallerTestCase):
    def run_entry_point(self, entry_point, *argv: str) -> int:
        with mock.patch.object(installer.sys, "argv", ["newsboat-summarize", *argv]):
            with self.assertLogs(level="INFO") as logs:
                exit_code = entry_point()
        self.logs = logs.output
        return exit_code

    def test_install_main_uses_home_option(self) -> None:
        exit_code = self.run_entry_point(
            installer.install_main, "--home", str(self.home)
        )

        self.assertEqual(exit_code, 0)
        self.assertTrue(self.paths.script.is_file())
        self.assertTrue(self.paths.config.is_file())
        self.assertTrue(
            any(line.startswith("macro m ") for line in self.newsboat_lines())
        )
        self.check_dependencies.assert_called_once_with(self.home)

    def test_install_main_reports_error(self) -> None:
        with mock.patch.object(
            installer, "install", side_effect=InstallError("Could not create x")
        ):
            exit_code = self.run_entry_point(
                installer.install_main, "--home", str(self.home)
            )

        self.assertEqual(exit_code, 1)
        self.assertIn("ERROR:root:ERROR: Could not create x", self.logs)

    def test_uninstall_main_with_yes_skips_prompt(self) -> None:
        self.install()

        with mock.patch.object(installer, "TEMP_FILES", ()):
            with mock.patch("builtins.input") as fake_input:
                exit_code = self.run_entry_point(
                    installer.uninstall_main, "--home", str(self.home), "--yes"
                )

        self.assertEqual(exit_code, 0)
        fake_input.assert_not_called()
        self.assertFalse(self.paths.script.exists())
        self.assertFalse(self.paths.config.exists())
        self.assertFalse(
            any("newsboat-summarize" in line for line in self.newsboat_lines())
        )

    def test_uninstall_main_asks_for_confirmation(self) -> None:
        self.install()

        with mock.patch.object(installer, "TEMP_FILES", ()):
            with mock.patch("builtins.input", return_value="n") as fake_input:
                exit_code = self.run_entry_point(
                    installer.uninstall_main, "--home", str(self.home)
                )

        self.assertEqual(exit_code, 0)
        fake_input.assert_called_once()
        self.assertTrue(self.paths.script.exists())
        self.assertTrue(self.paths.config.exists())


if __name__ == "__main__":
    unittest.main()
