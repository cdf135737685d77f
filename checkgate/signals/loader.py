"""
Signal loading.

Signals are produced by external tooling (test runners, linters, scanners).
These helpers only turn their output into a mapping; values that are not
booleans are passed through so the evaluator can reject them by rule id.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from checkgate.core.errors import SignalFileNotFoundError, SignalFormatError

logger = structlog.get_logger(__name__)

TRUE_TOKENS = frozenset({"true", "yes", "pass", "passed", "1"})
FALSE_TOKENS = frozenset({"false", "no", "fail", "failed", "0"})


def load_signal_file(path: str | Path) -> dict[str, Any]:
    """
    Load a signal from a YAML or JSON file.

    Raises:
        SignalFileNotFoundError: The file does not exist.
        SignalFormatError: The file is not a mapping of rule id to value.
    """
    signal_path = Path(path)
    if not signal_path.is_file():
        raise SignalFileNotFoundError(f"Signal file not found: {signal_path}")

    content = signal_path.read_text(encoding="utf-8")
    try:
        # JSON may be tab-indented, which YAML does not allow
        data = json.loads(content) if signal_path.suffix.lower() == ".json" else yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SignalFormatError(f"Invalid signal file {signal_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SignalFormatError(f"Signal file {signal_path} must contain a mapping of rule id to true/false")

    logger.debug("signal_file_loaded", signal_file=str(signal_path), entries=len(data))
    return {str(key): value for key, value in data.items()}


def parse_signal_pairs(pairs: Iterable[str]) -> dict[str, Any]:
    """
    Parse ``rule_id=value`` pairs. Later pairs override earlier ones.

    Recognised values (case-insensitive) become booleans; anything else is
    kept as the raw string.
    """
    signal: dict[str, Any] = {}
    for pair in pairs:
        rule_id, sep, raw = pair.partition("=")
        rule_id = rule_id.strip()
        if not sep or not rule_id:
            raise SignalFormatError(f"Expected 'rule_id=true|false', got '{pair}'")

        token = raw.strip().lower()
        if token in TRUE_TOKENS:
            signal[rule_id] = True
        elif token in FALSE_TOKENS:
            signal[rule_id] = False
        else:
            signal[rule_id] = raw.strip()
    return signal


def merge_signals(*signals: Mapping[str, Any]) -> dict[str, Any]:
    """Merge signals into a new dict; later mappings win."""
    merged: dict[str, Any] = {}
    for signal in signals:
        merged.update(signal)
    return merged
