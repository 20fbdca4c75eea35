"""
Pytest configuration and fixtures for coverscan tests.
"""

import pytest


@pytest.fixture(scope="session")
def vocabulary():
    """Return the packaged CoverVocabulary."""
    from coverscan.vocabulary import default_vocabulary

    return default_vocabulary()


@pytest.fixture
def fast_config():
    """Return a ScanConfig without UI pacing delays."""
    from coverscan import ScanConfig

    return ScanConfig(found_delay=0.0, error_delay=0.0)
