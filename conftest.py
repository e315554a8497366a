"""Shared pytest fixtures for the Moving Again site tools."""

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).parent

# site_utils / site_server importable without an install
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))


@pytest.fixture
def base_dir():
    return BASE_DIR
