#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: locale - Locale parsing and canonical form
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Locale Parser Fuzzer (Atheris).

Targets Locale.parse(), ExtensionsMap.parse() and the ExtensionsMap setters.
Every accepted input must survive canonical round-trip; every rejected input
must fail with LocaleError.

Metrics:
- Pattern coverage (raw_text, subtag_soup, extension_tail, setters)
- Accepted/rejected counts
- Real memory usage (RSS via psutil)
"""

from __future__ import annotations

import argparse
import atexit
import gc
import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from typing import Any

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for the dependency check
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for the dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

_missing = [
    name for name, module in (("psutil", _psutil_mod), ("atheris", _atheris_mod)) if module is None
]
if _missing:
    print(f"Missing fuzzing dependencies: {', '.join(_missing)}")
    print("Install with: pip install localetag[fuzz]")
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413
import psutil  # noqa: E402  # pylint: disable=C0412,C0413

GC_INTERVAL = 256


@dataclass
class LocaleFuzzerState:
    """Counters reported when the fuzzer exits."""

    iterations: int = 0
    accepted: int = 0
    rejected: int = 0
    findings: int = 0
    peak_rss_mb: float = 0.0
    pattern_coverage: dict[str, int] = field(default_factory=dict)


_state = LocaleFuzzerState()

SUBTAG_SAMPLES = (
    "en", "und", "Latn", "US", "419", "macos", "1996",
    "u", "t", "x", "a", "hc", "h12", "ca", "buddhist", "kn", "true",
    "m0", "ungegn", "foo", "",
)

_PATTERNS = ("raw_text", "subtag_soup", "extension_tail", "setters")


class LocaleFuzzError(Exception):
    """Raised when an invariant breach is detected."""


def _emit_report() -> None:
    print(json.dumps(asdict(_state), indent=2, sort_keys=True))


atexit.register(_emit_report)

# Suppress logging and instrument imports
logging.getLogger("localetag").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["localetag"]):
    from localetag import ExtensionsMap, Locale, LocaleError


# --- Input Generators ---


def _gen_subtag_soup(fdp: atheris.FuzzedDataProvider) -> str:
    count = fdp.ConsumeIntInRange(1, 12)
    parts = []
    for _ in range(count):
        if fdp.ConsumeBool():
            parts.append(fdp.PickValueInList(list(SUBTAG_SAMPLES)))
        else:
            parts.append(fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 9)))
    return fdp.PickValueInList(["-", "_"]).join(parts)


# --- Pattern Implementations ---


def _check_locale(text: str) -> None:
    try:
        locale = Locale.parse(text)
    except LocaleError:
        _state.rejected += 1
        return
    _state.accepted += 1
    canonical = str(locale)
    reparsed = Locale.parse(canonical)
    if reparsed != locale or str(reparsed) != canonical:
        msg = f"Round-trip mismatch: {text!r} -> {canonical!r} -> {reparsed}"
        raise LocaleFuzzError(msg)


def _pattern_raw_text(fdp: atheris.FuzzedDataProvider) -> None:
    _check_locale(fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 64)))


def _pattern_subtag_soup(fdp: atheris.FuzzedDataProvider) -> None:
    _check_locale(_gen_subtag_soup(fdp))


def _pattern_extension_tail(fdp: atheris.FuzzedDataProvider) -> None:
    text = _gen_subtag_soup(fdp)
    try:
        extensions = ExtensionsMap.parse(text)
    except LocaleError:
        _state.rejected += 1
        return
    _state.accepted += 1
    if ExtensionsMap.parse(str(extensions)) != extensions:
        msg = f"Extension round-trip mismatch: {text!r} -> {extensions}"
        raise LocaleFuzzError(msg)


def _pattern_setters(fdp: atheris.FuzzedDataProvider) -> None:
    extensions = ExtensionsMap()
    for _ in range(fdp.ConsumeIntInRange(1, 6)):
        value = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 10))
        try:
            match fdp.ConsumeIntInRange(0, 3):
                case 0:
                    extensions.set_unicode_value(
                        fdp.PickValueInList(["hc", "ca", "kn", "zz"]), value or None
                    )
                case 1:
                    extensions.set_unicode_attribute(value)
                case 2:
                    extensions.set_transform_field(fdp.PickValueInList(["m0", "h0"]), value)
                case _:
                    extensions.set_private_value(value)
        except LocaleError:
            _state.rejected += 1
    if ExtensionsMap.parse(str(extensions)) != extensions:
        msg = f"Setter-built map does not round-trip: {extensions}"
        raise LocaleFuzzError(msg)


_PATTERN_DISPATCH: dict[str, Any] = {
    "raw_text": _pattern_raw_text,
    "subtag_soup": _pattern_subtag_soup,
    "extension_tail": _pattern_extension_tail,
    "setters": _pattern_setters,
}


def test_one_input(data: bytes) -> None:
    """Atheris entry point: fuzz locale parsing."""
    _state.iterations += 1
    fdp = atheris.FuzzedDataProvider(data)
    pattern = _PATTERNS[_state.iterations % len(_PATTERNS)]
    _state.pattern_coverage[pattern] = _state.pattern_coverage.get(pattern, 0) + 1

    try:
        _PATTERN_DISPATCH[pattern](fdp)
    except LocaleFuzzError:
        _state.findings += 1
        raise
    finally:
        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()
            rss_mb = psutil.Process().memory_info().rss / (1024 * 1024)
            _state.peak_rss_mb = max(_state.peak_rss_mb, rss_mb)


def main() -> None:
    """Run the locale parser fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Locale parser fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=4096")

    sys.argv = [sys.argv[0], *remaining]
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
