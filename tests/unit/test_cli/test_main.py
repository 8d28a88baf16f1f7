"""
Unit tests for the command-line interface.
"""

import io
from unittest.mock import patch

import pytest

from procgroups.cli.main import (
    EXIT_CONFIG_ERROR,
    EXIT_MISSING_PROCESSES,
    EXIT_OK,
    main_cli,
)


@pytest.fixture
def scanned_processes(test_utils):
    return [
        test_utils.make_attrs(name="sshd", cmdline=["/usr/sbin/sshd", "-D"], pid=10),
        test_utils.make_attrs(name="nginx", cmdline=["/usr/sbin/nginx"], pid=20),
        test_utils.make_attrs(name="myapp", cmdline=["myapp", "--flag=abc"], pid=30),
        test_utils.make_attrs(name="kworker/0:1", cmdline=[], pid=40),
    ]


@pytest.mark.unit
class TestMainCli:
    """Test the procgroups command."""

    @patch("procgroups.cli.main.iter_process_attributes")
    def test_prints_groups(self, mock_iter, rules_files, scanned_processes):
        mock_iter.return_value = iter(scanned_processes)
        out = io.StringIO()

        exit_code = main_cli(["--config", str(rules_files["yaml"])], out=out)

        assert exit_code == EXIT_OK
        lines = out.getvalue().splitlines()
        assert lines == ["abc\t1\t30", "nginx\t1\t20", "sshd\t1\t10"]
        mock_iter.assert_called_once_with(None)

    @patch("procgroups.cli.main.iter_process_attributes")
    def test_reports_missing_processes(self, mock_iter, rules_files, scanned_processes):
        mock_iter.return_value = iter(scanned_processes[2:])
        out = io.StringIO()

        exit_code = main_cli(["--config", str(rules_files["yaml"])], out=out)

        assert exit_code == EXIT_MISSING_PROCESSES
        assert "missing:\tnginx" in out.getvalue()
        assert "missing:\tsshd" in out.getvalue()

    @patch("procgroups.cli.main.iter_process_attributes")
    def test_show_unmatched(self, mock_iter, rules_files, scanned_processes):
        mock_iter.return_value = iter(scanned_processes)
        out = io.StringIO()

        main_cli(["--config", str(rules_files["yaml"]), "--show-unmatched"], out=out)

        assert "unmatched:\t40\tkworker/0:1" in out.getvalue()

    @patch("procgroups.cli.main.iter_process_attributes")
    def test_pid_filter_is_passed_through(self, mock_iter, rules_files):
        mock_iter.return_value = iter([])

        main_cli(["--config", str(rules_files["yaml"]), "-p", "5", "-p", "6"], out=io.StringIO())

        mock_iter.assert_called_once_with([5, 6])

    @patch("procgroups.cli.main.iter_process_attributes")
    def test_check_config_does_not_scan(self, mock_iter, rules_files):
        out = io.StringIO()

        exit_code = main_cli(["--config", str(rules_files["toml"]), "--check-config"], out=out)

        assert exit_code == EXIT_OK
        assert "4 rules, 2 expected process names" in out.getvalue()
        mock_iter.assert_not_called()

    def test_invalid_config_exits(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("process_names:\n  - name: only-a-name\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(path)], out=io.StringIO())

        assert exc_info.value.code == EXIT_CONFIG_ERROR

    def test_missing_config_exits(self, temp_dir):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(temp_dir / "absent.yaml")], out=io.StringIO())

        assert exc_info.value.code == EXIT_CONFIG_ERROR
