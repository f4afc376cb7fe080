"""Test configuration and fixtures for the Person API."""

import os

# Must be set before the application context is first imported
os.environ.setdefault("APP_ENVIRONMENT", "test")

from tests.fixtures import *  # noqa: E402,F401,F403
