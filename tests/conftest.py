"""Root conftest — shared test configuration."""

import os

# Keep test output readable and independent of a developer's .env
os.environ.setdefault("TOPOGUARD_LOG_FORMAT", "text")
os.environ.setdefault("TOPOGUARD_LOG_LEVEL", "DEBUG")
