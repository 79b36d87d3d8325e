import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from officekit import debug_utils


@pytest.fixture(autouse=True)
def run_log_dir(tmp_path, monkeypatch):
    """Send run logs to a temp dir so tests never touch the project's logs/."""
    log_dir = tmp_path / "debug_logs"
    monkeypatch.setattr(debug_utils, "DEBUG_COLLECTION_DIR", log_dir)
    monkeypatch.setattr(debug_utils, "CURRENT_VERBOSITY", debug_utils.VERBOSITY_LEVELS["DEBUG"])
    debug_utils.reset_run_files()
    yield log_dir
    debug_utils.reset_run_files()


@pytest.fixture
def fast_argon2():
    """Argon2id parameters cheap enough for unit tests."""
    return {"time_cost": 1, "memory_cost": 8, "parallelism": 1}
