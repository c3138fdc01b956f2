"""Pytest configuration for the L20nLexEngine test suite.

Hypothesis profiles:
- dev: 500 examples, random (default for local runs)
- ci: 50 examples, derandomized; selected when CI=true

HYPOTHESIS_PROFILE=<name> overrides the detection.

Tests marked ``fuzz`` (see tests/test_parser_fuzzing.py) are skipped unless
selected with ``pytest -m fuzz`` or by naming the fuzz module directly.
"""

import os

import pytest
from hypothesis import Phase, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless they were asked for."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any("test_parser_fuzzing" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
