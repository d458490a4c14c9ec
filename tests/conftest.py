"""Root conftest: shared test configuration."""

import os

# Tests never pick up a developer's local environment mode
os.environ.setdefault("ENVIRONMENT", "Production")
os.environ.setdefault("LOG_FORMAT", "text")
