# =============================================================================
# core/highlight.py  —  Line-Oriented Token Highlighter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Splits Arduino sketch source into styled tokens for the circuit
#   workspace widget.  No lexer, no parser: each line is classified on its
#   own in one pass.
#
# RULES (per line):
#   1. Starts with "//" after leading whitespace → whole line is a comment
#   2. Starts with "#" after leading whitespace  → whole line is preprocessor
#   3. Otherwise cut the line into whitespace runs, word runs and
#      punctuation runs, then tag each fragment:
#        keyword set member → keyword, all digits → number, else plain
#
# ROUND TRIP:
#   Joining the token texts always gives back the original line.
# =============================================================================

import re

from core.models import Token, TokenKind

ARDUINO_KEYWORDS = frozenset({
    "void",
    "int",
    "float",
    "bool",
    "byte",
    "const",
    "if",
    "else",
    "for",
    "while",
    "return",
    "digitalWrite",
    "digitalRead",
    "analogRead",
    "analogWrite",
    "pinMode",
    "delay",
    "HIGH",
    "LOW",
    "INPUT",
    "OUTPUT",
    "setup",
    "loop",
})

COMMENT_MARKER = "//"
PREPROCESSOR_MARKER = "#"

# Every character is whitespace, a word character or neither, so these three
# alternatives cover the whole line with no gaps.
_FRAGMENT = re.compile(r"\s+|\w+|[^\w\s]+")
_DIGITS = re.compile(r"\d+")


def _classify(fragment: str, keywords: frozenset) -> TokenKind:
    if fragment in keywords:
        return TokenKind.KEYWORD
    if _DIGITS.fullmatch(fragment):
        return TokenKind.NUMBER
    return TokenKind.PLAIN


def highlight_line(line: str, keywords: frozenset = ARDUINO_KEYWORDS) -> list[Token]:
    """Tokenize a single line (no trailing newline)."""
    trimmed = line.lstrip()

    if trimmed.startswith(COMMENT_MARKER):
        return [Token(line, TokenKind.COMMENT)]

    if trimmed.startswith(PREPROCESSOR_MARKER):
        return [Token(line, TokenKind.PREPROCESSOR)]

    return [
        Token(fragment, _classify(fragment, keywords))
        for fragment in _FRAGMENT.findall(line)
    ]


def highlight_code(code: str, keywords: frozenset = ARDUINO_KEYWORDS) -> list[list[Token]]:
    """Tokenize a whole sketch, one token list per line."""
    return [highlight_line(line, keywords) for line in code.split("\n")]
