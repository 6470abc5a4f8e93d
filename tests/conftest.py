"""Shared pytest setup: Hypothesis profiles and the fuzz-test gate.

Profiles (max_examples is set only here):
- dev: 500 examples, default for local runs
- ci: 50 examples, derandomized, selected when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE overrides the choice, e.g. HYPOTHESIS_PROFILE=ci pytest.

Tests marked ``fuzz`` (declared in pyproject.toml) live in
test_locale_fuzzing.py and only run with ``pytest -m fuzz`` or when that
module is named on the command line.

Python 3.13+.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)

_PROFILES = frozenset({"dev", "ci", "verbose"})
_FUZZ_MODULE = "test_locale_fuzzing"


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked locale tests unless they were asked for."""
    if _fuzz_requested(config):
        return
    skip_fuzz = pytest.mark.skip(reason="locale fuzzing: run with pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip_fuzz)
