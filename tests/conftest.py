"""Pytest configuration for the durationformat test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Locale data:
The ``fake_provider`` fixture serves a small, fixed locale table so that
negotiation tests do not depend on the CLDR revision shipped with Babel.
Tests that exercise BabelLocaleDataProvider only assert facts that hold
across CLDR releases.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.locale_data import FakeLocaleDataProvider

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# LOCALE DATA FIXTURES
# =============================================================================


@pytest.fixture
def fake_provider() -> FakeLocaleDataProvider:
    """Provider with a small fixed locale table (see FakeLocaleDataProvider)."""
    return FakeLocaleDataProvider()


@pytest.fixture
def no_system_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make system locale detection report a locale no provider knows."""
    monkeypatch.setattr(
        "durationformat.runtime.negotiator.get_system_locale",
        lambda **_: "xx_XX",
    )
