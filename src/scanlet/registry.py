"""Token registry: ordered (identifier, pattern) definitions.

Order is priority. When several definitions match at the same position,
the one registered first wins, so callers disambiguate by ordering
(register keywords before a generic identifier pattern).

Thread Safety:
TokenRegistry is immutable after creation. Safe to share.
Use TokenRegistryBuilder for mutable construction.

Example:
    >>> registry = (
    ...     TokenRegistryBuilder()
    ...     .define("FUNCTION", r"function")
    ...     .define("IDENTIFIER", r"[a-zA-Z_][a-zA-Z0-9_]*")
    ...     .build()
    ... )
    >>> registry.identifiers
    ('FUNCTION', 'IDENTIFIER')
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from scanlet.config import get_scan_config
from scanlet.errors import PatternError
from scanlet.patterns import PatternEngine, RegexEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenDefinition[IdT]:
    """One registered token kind.

    Attributes:
        identifier: Caller-chosen identifier (enum member, string, ...)
        pattern: Compiled pattern, opaque outside the engine
        source: Pattern text as given to define()

    """

    identifier: IdT
    pattern: Any
    source: str


class TokenRegistry[IdT]:
    """Immutable, ordered registry of token definitions.

    Thread Safety:
        Immutable after creation. Safe to share across threads and lexers.
    """

    __slots__ = ("_definitions", "_engine")

    def __init__(
        self,
        definitions: tuple[TokenDefinition[IdT], ...],
        engine: PatternEngine,
    ) -> None:
        """Initialize registry with pre-compiled definitions.

        Use TokenRegistryBuilder to create instances.
        """
        self._definitions = definitions
        self._engine = engine

    @property
    def definitions(self) -> tuple[TokenDefinition[IdT], ...]:
        """All definitions, highest priority first."""
        return self._definitions

    @property
    def engine(self) -> PatternEngine:
        """Engine that compiled the patterns and matches them."""
        return self._engine

    @property
    def identifiers(self) -> tuple[IdT, ...]:
        """Identifiers in priority order (may contain duplicates)."""
        return tuple(d.identifier for d in self._definitions)

    def __iter__(self) -> Iterator[TokenDefinition[IdT]]:
        return iter(self._definitions)

    def __len__(self) -> int:
        """Number of definitions."""
        return len(self._definitions)

    def __contains__(self, identifier: object) -> bool:
        """Support 'identifier in registry' syntax."""
        return any(d.identifier == identifier for d in self._definitions)

    def __repr__(self) -> str:
        return f"TokenRegistry({len(self._definitions)} definitions, {self._engine!r})"


class TokenRegistryBuilder[IdT]:
    """Mutable builder for TokenRegistry.

    Patterns are compiled as they are defined, so a bad pattern fails here
    rather than halfway through a scan.

    Args:
        engine: Pattern engine (defaults to a RegexEngine using the current
            ScanConfig's pattern_flags)
    """

    __slots__ = ("_definitions", "_engine")

    def __init__(self, engine: PatternEngine | None = None) -> None:
        if engine is None:
            engine = RegexEngine(get_scan_config().pattern_flags)
        self._engine = engine
        self._definitions: list[TokenDefinition[IdT]] = []

    def define(self, identifier: IdT, pattern: str) -> TokenRegistryBuilder[IdT]:
        """Compile a pattern and append it at the lowest priority.

        No duplicate or overlap detection is performed.

        Args:
            identifier: Identifier reported for lexemes this pattern matches
            pattern: Pattern text in the engine's dialect

        Returns:
            Self for chaining

        Raises:
            PatternError: If the engine rejects the pattern
        """
        try:
            compiled = self._engine.compile(pattern)
        except ValueError as exc:
            raise PatternError(identifier, str(pattern), str(exc)) from exc

        # Pre-compiled re.Pattern objects keep their original text
        source = getattr(pattern, "pattern", pattern)
        self._definitions.append(TokenDefinition(identifier, compiled, str(source)))
        logger.debug("Defined token %r as %r", identifier, pattern)
        return self

    def define_all(self, pairs: Iterable[tuple[IdT, str]]) -> TokenRegistryBuilder[IdT]:
        """Define several (identifier, pattern) pairs in order.

        Returns:
            Self for chaining
        """
        for identifier, pattern in pairs:
            self.define(identifier, pattern)
        return self

    def build(self) -> TokenRegistry[IdT]:
        """Build immutable registry from the definitions so far.

        The builder stays usable; later define() calls do not affect
        registries that were already built.
        """
        registry = TokenRegistry(tuple(self._definitions), self._engine)
        logger.debug("Built token registry with %d definitions", len(registry))
        return registry

    def __len__(self) -> int:
        """Number of definitions so far."""
        return len(self._definitions)


def create_registry[IdT](
    pairs: Iterable[tuple[IdT, str]],
    engine: PatternEngine | None = None,
) -> TokenRegistry[IdT]:
    """Build a registry from (identifier, pattern) pairs in one call.

    Raises:
        PatternError: If any pattern is rejected
    """
    return TokenRegistryBuilder(engine).define_all(pairs).build()
