"""
  sigma Reader, Lexer and Parser

- Streaming, lazy lexing; single-token lookahead recursive descent.
- Emits Python primitives instead of cons cells:

    - integers -> int (signed 64-bit)
    - symbols  -> Symbol
    - lists    -> Python list, built fresh and never mutated once returned

Grammar: whitespace separates tokens; a token starting with a digit is a
greedy run of digits; `(` ... `)` is a list, possibly empty; any other run of
ASCII letters, digits and punctuation (parentheses excluded) is a symbol.
"""

from __future__ import annotations

import logging
import re
import string
from typing import Iterator, Optional

from sigma import SExpression
from sigma.types.errors import SigmaRecursionError, SigmaSyntaxError
from sigma.types.integer import I64_DIGITS, fits_i64
from sigma.types.symbol import Symbol

logger = logging.getLogger(__name__)

WHITESPACE = " \n\t\r"

SYMBOL_CHARS = "".join(
    c for c in string.ascii_letters + string.digits + string.punctuation if c not in "()"
)
_SYMBOL_CLASS = re.escape(SYMBOL_CHARS)

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    rf"|(?P<number>[0-9][{_SYMBOL_CLASS}]*)"  # digit run; trailing symbol chars make it malformed
    rf"|(?P<symbol>[{_SYMBOL_CLASS}]+)"
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        current_char = source[pos]
        if current_char in WHITESPACE:
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SigmaSyntaxError(f"unexpected character: {current_char}", pos)

        tok_type = m.lastgroup
        tok_val = m.group(tok_type)
        if tok_type == "number" and not tok_val.isdigit():
            raise SigmaSyntaxError(f"error parsing number: {tok_val}", pos)
        yield tok_type, tok_val
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression | None:
        """Parse one expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "number":
            self.advance()
            # Length check first: int() refuses very long digit strings
            digits = tok_val.lstrip("0") or "0"
            if len(digits) > I64_DIGITS or not fits_i64(number := int(digits)):
                raise SigmaSyntaxError(f"error parsing number: {tok_val} out of range")
            return number

        if tok_type == "symbol":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                if self.peek()[0] is None:
                    raise SigmaSyntaxError("unterminated list")
                if self.peek()[0] == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return items

        # A closing paren with no list open
        raise SigmaSyntaxError(f"unexpected character: {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(text: str) -> list[SExpression]:
    """Read every top-level form in `text`.

    Whitespace-only input yields an empty list. Raises SigmaSyntaxError on
    malformed input; nothing is returned for partially readable text.
    """
    try:
        forms = list(TokenStream(lex(text)).parse_all())
    except RecursionError:
        raise SigmaRecursionError("maximum recursion depth exceeded") from None
    logger.debug("read %d form(s)", len(forms))
    return forms
