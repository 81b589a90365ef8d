"""Tokenizer for the Lucid language.

Lucid source is line oriented: every non-blank line is one statement and
its words are separated by whitespace. The split is done by a small Lark
grammar with a `line` rule of one or more `WORD` terminals ending in a
newline. In-line whitespace (including the `\\r` of a `\\r\\n` pair) is
ignored, which trims each line and collapses runs of spaces. Lines holding
nothing but whitespace reduce to a bare newline and disappear from the
tree.

The `tokenize` function is the public entry point and returns a list of
lines, each a list of word tokens.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer
from lark.exceptions import LarkError

from .errors import LucidError, MALFORMED_INPUT
from .types import ErrorVal


LUCID_LEXICAL_GRAMMAR = r"""
    start: (line | _NL)*
    line: WORD+ _NL

    WORD: /\S+/
    _NL: /\n/
    INLINE_WS: /[^\S\n]+/
    %ignore INLINE_WS
"""


LUCID_LEXER = Lark(
    LUCID_LEXICAL_GRAMMAR,
    parser='lalr',
    lexer='basic',
    maybe_placeholders=False,
)


class LineTransformer(Transformer):
    """Turns the parse tree into nested lists of word strings."""

    def start(self, items):
        return list(items)

    def line(self, items):
        return [str(token) for token in items]


def tokenize(source: str) -> List[List[str]]:
    """Split source text into lines of whitespace separated words.

    Blank lines are dropped and every line is trimmed. A final newline is
    appended so that the last line is terminated like all the others.
    """
    try:
        tree = LUCID_LEXER.parse(source + '\n')
    except LarkError as e:
        raise LucidError(ErrorVal(MALFORMED_INPUT, f'cannot tokenize source: {e}'))
    return LineTransformer().transform(tree)
