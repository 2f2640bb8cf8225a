"""Tests for the ``console-tools doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS when nothing critical fails.
* Doctor returns UNEXPECTED_ERROR when the Python version check fails.
* Plain-text rendering when Rich is unavailable.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from console_tools.utils import exit_codes


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from console_tools.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from console_tools.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_not_installed_is_warning(self) -> None:
        from console_tools.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestLocaleCheck:
    @patch("console_tools.cli.doctor.current_decimal_point", return_value=",")
    @patch("console_tools.cli.doctor.locale.setlocale", return_value="de_DE.UTF-8")
    def test_reports_decimal_point(self, _mock_set: MagicMock, _mock_dp: MagicMock) -> None:
        from console_tools.cli.doctor import _locale_check

        label, value, status = _locale_check()
        assert label == "Locale"
        assert value == "de_DE.UTF-8 (decimal point ',')"
        assert "OK" in status


class TestOsCheck:
    @patch("console_tools.cli.doctor.platform.machine", return_value="arm64")
    @patch("console_tools.cli.doctor.platform.release", return_value="23.4.0")
    @patch("console_tools.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from console_tools.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


class TestVersionCheck:
    def test_returns_current_version(self) -> None:
        from console_tools.cli.doctor import _console_tools_version_check
        from console_tools.version import __version__

        label, value, status = _console_tools_version_check()
        assert label == "console-tools"
        assert value == __version__


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        from console_tools.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed." in capsys.readouterr().out

    @patch(
        "console_tools.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_failure_returns_error(
        self, _mock_py: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from console_tools.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.UNEXPECTED_ERROR
        assert "Some checks failed." in capsys.readouterr().out

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(self, capsys: pytest.CaptureFixture[str]) -> None:
        from console_tools.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "console-tools doctor" in out
        assert "NOT INSTALLED" in out
        assert "WARN" in out
        assert "[green]" not in out
