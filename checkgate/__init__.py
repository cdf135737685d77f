"""
checkgate: rule-based compliance gate for code changes.
"""

__version__ = "0.1.0"
