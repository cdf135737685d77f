"""Signal sources: files and command-line pairs mapping rule ids to outcomes."""

from checkgate.signals.loader import load_signal_file, merge_signals, parse_signal_pairs

__all__ = [
    "load_signal_file",
    "merge_signals",
    "parse_signal_pairs",
]
