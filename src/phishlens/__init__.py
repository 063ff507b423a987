"""Heuristic screenshot check for phishing imitations of known login pages."""

__version__ = "1.0.0"
