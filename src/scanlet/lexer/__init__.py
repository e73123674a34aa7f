"""Scan driver and its building blocks.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, match_at, LocationTracker
├── core.py              # Lexer class (scan loop + callback dispatch)
├── matcher.py           # First-match, anchored pattern search
└── tracker.py           # Line/column/offset bookkeeping

Usage:
    >>> from scanlet import create_registry
    >>> from scanlet.lexer import Lexer
    >>> registry = create_registry([("NUM", r"[0-9]+"), ("NL", r"\\n")])
    >>> for token in Lexer(registry).tokenize("1\\n22"):
    ...     print(token)
    Token(NUM, '1', 1:1)
    Token(NL, '\\n', 1:2)
    Token(NUM, '22', 2:1)

"""

from scanlet.lexer.core import ErrorCallback, Lexer, MatchCallback
from scanlet.lexer.matcher import TokenMatch, match_at
from scanlet.lexer.tracker import LocationTracker

__all__ = [
    "ErrorCallback",
    "Lexer",
    "LocationTracker",
    "MatchCallback",
    "TokenMatch",
    "match_at",
]
