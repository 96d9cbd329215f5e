"""
Shared fixtures for the vibe-css test suite.

Provides:
- Default design tokens and a generator built on them
- A generator with an empty namespace prefix
- Environment isolation for token loading
"""

import pytest

from vibe_css.config.loader import ENV_VARS
from vibe_css.config.models import DesignTokens
from vibe_css.generator import UtilityGenerator


@pytest.fixture
def tokens() -> DesignTokens:
    """Default design tokens (prefix 'vibe')."""
    return DesignTokens()


@pytest.fixture
def generator(tokens: DesignTokens) -> UtilityGenerator:
    """Generator over the default tokens."""
    return UtilityGenerator(tokens)


@pytest.fixture
def bare_generator() -> UtilityGenerator:
    """Generator with no namespace prefix."""
    return UtilityGenerator(DesignTokens(prefix=""))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VIBE_CSS_* variables from the host out of every test."""
    for env_var in ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
