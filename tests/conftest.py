"""Test session setup.

The configuration is read when `src.catalog.runtime.context` is first
imported, so the test environment must be in place before any fixture
module imports application code.
"""

import os
from pathlib import Path

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["CONFIG_FILE"] = str(Path(__file__).resolve().parent.parent / "config.yaml")
# Promoted to DATABASE_URL / LOG_LEVEL by the test environment overrides
os.environ["TEST_DATABASE_URL"] = "sqlite://"
os.environ["TEST_LOG_LEVEL"] = "WARNING"

from tests.fixtures import *  # noqa: E402,F401,F403
