"""Tokenize a small script and print every token with its location.

Uses a deliberately messy sample (tabs, blank lines, trailing spaces) to
show that locations stay correct. Append an unknown character such as
"@" to SCRIPT to see the syntax error report.
"""

from enum import Enum, auto

from scanlet import Lexer, Location, ScanError, Span, TokenRegistryBuilder, raise_scan_error

SCRIPT = (
    'script "TestScript"\n'
    "\n"
    "\n"
    "// This is a comment\n"
    "function TestFunc\n"
    "{\n"
    "\t\tTestInstruction 1, 2, 3  // This is also a comment\n"
    "\n"
    '    Teapot "A    string",\t    jazzy\n'
    "}\n"
    "\n"
    "\n"
    "function Ginger\n"
    "{\n"
    "    Hello, World    \n"
    "    \n"
    "}\n"
)


class Tok(Enum):
    COMMENT = auto()
    FUNCTION = auto()
    SCRIPT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    COMMA = auto()
    LBRACE = auto()
    RBRACE = auto()
    WHITESPACE = auto()
    NEWLINE = auto()


registry = (
    TokenRegistryBuilder[Tok]()
    .define(Tok.COMMENT, r"//.*\n")
    .define(Tok.FUNCTION, r"function")
    .define(Tok.SCRIPT, r"script")
    .define(Tok.IDENTIFIER, r"[a-zA-Z_][a-zA-Z0-9_]*")
    .define(Tok.INTEGER, r"[0-9]+")
    .define(Tok.FLOAT, r"[0-9]+\.[0-9]*")
    .define(Tok.STRING, r'".*"')
    .define(Tok.COMMA, r",")
    .define(Tok.LBRACE, r"\{")
    .define(Tok.RBRACE, r"\}")
    .define(Tok.WHITESPACE, r"[ \t]+")
    .define(Tok.NEWLINE, r"(\r?\n)+")
    .build()
)

matched: list[tuple[Location, Tok, str]] = []


def on_match(location: Location, identifier: Tok, span: Span) -> None:
    matched.append((location, identifier, span.text))


try:
    Lexer(registry).analyze(SCRIPT, on_match, raise_scan_error)
except ScanError as err:
    offset = err.location.offset if err.location else 0
    print(f"SYNTAX ERROR: Line {err.line}, col {err.column}: {SCRIPT[offset:]}")
else:
    for location, identifier, lexeme in matched:
        shown = lexeme.replace("\n", "\\n").replace("\t", "\\t")
        print(f"Line {location.line}, col {location.column}: {identifier.name} '{shown}'")
