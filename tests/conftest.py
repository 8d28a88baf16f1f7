"""
Pytest configuration and shared fixtures for the procgroups test suite.
"""

import shutil
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_rules_data() -> List[Dict[str, Any]]:
    """Raw process_names entries as a YAML loader would produce them."""
    return [
        {"name": "nginx", "exe": ["/usr/sbin/nginx"], "report_missing": True},
        {"comm": ["sshd"], "report_missing": True},
        {
            "name": "{{.Matches.val}}",
            "cmdline": [r"^myapp --flag=(?P<val>\w+)$"],
        },
        {"name": "{{.Comm}}", "cmdline": [".+"]},
    ]


SAMPLE_RULES_YAML = r"""
process_names:
  - name: "nginx"
    exe:
      - /usr/sbin/nginx
    report_missing: true
  - comm:
      - sshd
    report_missing: true
  - name: "{{.Matches.val}}"
    cmdline:
      - '^myapp --flag=(?P<val>\w+)$'
  - name: "{{.Comm}}"
    cmdline:
      - '.+'
"""

SAMPLE_RULES_TOML = r"""
[[process_names]]
name = "nginx"
exe = ["/usr/sbin/nginx"]
report_missing = true

[[process_names]]
comm = ["sshd"]
report_missing = true

[[process_names]]
name = "{{.Matches.val}}"
cmdline = ['^myapp --flag=(?P<val>\w+)$']

[[process_names]]
name = "{{.Comm}}"
cmdline = ['.+']
"""


@pytest.fixture
def rules_files(temp_dir):
    """Write the sample rules document in YAML and TOML form."""
    yaml_file = temp_dir / "process_names.yaml"
    yaml_file.write_text(SAMPLE_RULES_YAML, encoding="utf-8")

    toml_file = temp_dir / "process_names.toml"
    toml_file.write_text(SAMPLE_RULES_TOML, encoding="utf-8")

    return {"yaml": yaml_file, "toml": toml_file, "dir": temp_dir}


# ============================================================================
# Test Utilities
# ============================================================================


class TestUtils:
    """Utility functions for testing."""

    @staticmethod
    def make_attrs(name: str = "", cmdline=(), username: str = "root", pid: int = 100):
        """Create ProcessAttributes with sensible defaults."""
        from procgroups.models.process import ProcessAttributes

        return ProcessAttributes(
            name=name,
            cmdline=tuple(cmdline),
            username=username,
            pid=pid,
            start_time=datetime(2024, 1, 2, 3, 4, 5),
        )


@pytest.fixture
def test_utils():
    """Provide test utility functions."""
    return TestUtils


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset the configuration singleton after each test."""
    original_config_path = Path(__file__).parent.parent / "conf" / "process_names.yaml"

    yield

    from procgroups.config import clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(original_config_path)
