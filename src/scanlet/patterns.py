"""Pluggable pattern engines for token definitions.

The lexer never touches a regular-expression library directly. It talks
to a PatternEngine, which compiles pattern text once at definition time
and answers one question at scan time: does a match begin exactly here,
and if so, where does it end?

Engines:
- RegexEngine: standard library ``re`` dialect (the default)
- LiteralEngine: fixed strings, for keyword and punctuation tables

Thread Safety:
Both engines are stateless after construction. Compiled patterns are
immutable and may be shared across threads.

Example:
    >>> engine = RegexEngine()
    >>> compiled = engine.compile(r"[0-9]+")
    >>> engine.match_at(compiled, "ab123", 2, 5)
    5
    >>> engine.match_at(compiled, "ab123", 0, 5) is None
    True
"""

from __future__ import annotations

import re
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PatternEngine(Protocol):
    """Protocol for pattern compilation and anchored matching.

    Implementations must:
    - Raise ValueError from compile() when the text is not a valid pattern
    - Only report matches that start exactly at ``pos``
    - Never look at source beyond ``end``
    """

    def compile(self, text: Any) -> Any:
        """Compile pattern text into a reusable matcher.

        Raises:
            ValueError: If text is not a valid pattern in this dialect
        """
        ...

    def match_at(self, compiled: Any, source: str, pos: int, end: int) -> int | None:
        """Return the end of a match anchored at pos, or None.

        A zero-length match is reported as ``pos``; rejecting it is the
        caller's decision.
        """
        ...


class RegexEngine:
    """Pattern engine backed by the standard library ``re`` module.

    Patterns use Python's regular-expression dialect. Anchoring comes from
    ``Pattern.match(source, pos, endpos)``, so patterns never need a
    leading ``^`` or ``\\A``.

    Patterns are matched against the whole buffer, not a slice starting at
    the cursor:

    - ``^`` and ``\\A`` mean start of buffer (with ``re.MULTILINE``, ``^``
      also holds just after any newline). A definition such as
      ``^[a-z]+`` therefore matches only at offset 0 (or at line starts).
    - Lookbehind sees text before the cursor: ``(?<=:)[a-z]+`` matches
      at the cursor when the previous character is ``:``.
    - ``$`` and ``\\Z`` hold at ``end``.

    Args:
        flags: ``re`` flags applied to every pattern compiled from text
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: int = 0) -> None:
        self._flags = flags

    @property
    def flags(self) -> int:
        """Flags applied at compile time."""
        return self._flags

    def compile(self, text: str | re.Pattern[str]) -> re.Pattern[str]:
        """Compile pattern text (pre-compiled str patterns pass through).

        Raises:
            ValueError: If text is not a str (or str-based re.Pattern), or
                is not a valid regular expression
        """
        if isinstance(text, re.Pattern):
            if not isinstance(text.pattern, str):
                msg = "bytes patterns cannot match str sources"
                raise ValueError(msg)
            return text
        if not isinstance(text, str):
            msg = f"regex pattern must be str, got {type(text).__name__}"
            raise ValueError(msg)
        try:
            return re.compile(text, self._flags)
        except re.error as exc:
            raise ValueError(str(exc)) from exc

    def match_at(self, compiled: re.Pattern[str], source: str, pos: int, end: int) -> int | None:
        m = compiled.match(source, pos, end)
        if m is None:
            return None
        return m.end()

    def __repr__(self) -> str:
        return f"RegexEngine(flags={self._flags!r})"


class LiteralEngine:
    """Pattern engine matching fixed strings.

    Useful when every definition is a keyword or punctuation mark and no
    escaping should be needed (``"{"`` rather than ``r"\\{"``).
    """

    __slots__ = ()

    def compile(self, text: str) -> str:
        """Validate a literal.

        Raises:
            ValueError: If text is empty or not a string
        """
        if not isinstance(text, str):
            msg = f"literal pattern must be str, got {type(text).__name__}"
            raise ValueError(msg)
        if not text:
            raise ValueError("literal pattern must not be empty")
        return text

    def match_at(self, compiled: str, source: str, pos: int, end: int) -> int | None:
        if source.startswith(compiled, pos, end):
            return pos + len(compiled)
        return None

    def __repr__(self) -> str:
        return "LiteralEngine()"
