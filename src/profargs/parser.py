## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

from typing import Iterator, NamedTuple

import lark
from .errors import ArgumentsSyntaxError


# Empty options are allowed by the grammar, so `a,,b` and a trailing comma parse fine.
GRAMMAR = r"""start: option (_COMMA option)*
option: KEY? (EQUALS VALUE?)?

KEY: /[^,=]+/
VALUE: /[^,]+/
EQUALS: "="
_COMMA: ","
"""


class Option(NamedTuple):
    key: str
    value: str | None       # None without `=`, possibly empty after it.
    offset: int             # Position of the option within the whole string.


_PARSER = lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='contextual')


def _option_from_tree(node: lark.Tree) -> Option | None:
    tokens = [ch for ch in node.children if isinstance(ch, lark.Token)]
    if not tokens:
        return None
    key, value = '', None
    for tok in tokens:
        if tok.type == 'KEY':
            key = tok.value
        elif tok.type == 'EQUALS':
            value = ''
        elif tok.type == 'VALUE':
            value = tok.value
    return Option(key, value, tokens[0].start_pos)


def tokenize(text: str) -> Iterator[Option]:
    """Split `text` on commas, then each option on its first `=`; empty options are skipped.

    The grammar accepts any string, so a lark failure here means a broken grammar rather
    than bad input.  It still surfaces as `ArgumentsSyntaxError` with lark's position.
    """
    try:
        tree = _PARSER.parse(text)
    except lark.exceptions.LarkError as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        raise ArgumentsSyntaxError(str(exc), token=token_val, offset=attr('pos_in_stream')) from None

    for node in tree.children:
        if isinstance(node, lark.Tree) and (option := _option_from_tree(node)) is not None:
            yield option
