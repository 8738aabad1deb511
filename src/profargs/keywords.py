## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

from enum import Enum


MAX_KEYWORD_LENGTH = 12


class Keyword(Enum):
    """Every recognized option, with the spellings accepted for it."""

    # Actions
    START = ('start',)
    RESUME = ('resume',)
    STOP = ('stop',)
    CHECK = ('check',)
    STATUS = ('status',)
    LIST = ('list',)
    VERSION = ('version',)
    # Output formats
    COLLAPSED = ('collapsed', 'folded')
    FLAMEGRAPH = ('flamegraph', 'html')
    TREE = ('tree',)
    JFR = ('jfr',)
    FLAT = ('flat',)
    # Basic options
    EVENT = ('event',)
    INTERVAL = ('interval',)
    JSTACKDEPTH = ('jstackdepth',)
    SAFEMODE = ('safemode',)
    FILE = ('file',)
    # Filters
    FILTER = ('filter',)
    INCLUDE = ('include',)
    EXCLUDE = ('exclude',)
    THREADS = ('threads',)
    ALLKERNEL = ('allkernel',)
    ALLUSER = ('alluser',)
    CSTACK = ('cstack',)
    # Output style modifiers
    SIMPLE = ('simple',)
    DOT = ('dot',)
    SIG = ('sig',)
    ANN = ('ann',)
    BEGIN = ('begin',)
    END = ('end',)
    # FlameGraph options
    TITLE = ('title',)
    MINWIDTH = ('minwidth',)
    REVERSE = ('reverse',)

    @property
    def spellings(self) -> tuple[str, ...]:
        return self.value


def keyword_hash(keyword: str) -> int:
    """Pack the low 5 bits of the first 12 characters into one integer, first character lowest.

    Short keywords are padded with spaces, which contribute zero bits, so the result
    fits in 60 bits.  Letters lose their case, hence the exact check in `match_keyword`.
    """
    h = 0
    for shift, ch in zip(range(0, 5 * MAX_KEYWORD_LENGTH, 5), keyword.ljust(MAX_KEYWORD_LENGTH)):
        h |= (ord(ch) & 31) << shift
    return h


def _build_table() -> dict[int, tuple[str, Keyword]]:
    table = {}
    for kw in Keyword:
        for spelling in kw.spellings:
            assert len(spelling) <= MAX_KEYWORD_LENGTH, f"Keyword `{spelling}` is too long to hash."
            h = keyword_hash(spelling)
            assert h not in table, f"Keyword `{spelling}` collides with `{table[h][0]}`."
            table[h] = (spelling, kw)
    return table


_BY_HASH = _build_table()


def match_keyword(key: str) -> Keyword | None:
    """Return the keyword spelled exactly as `key`, or None if it is not part of the vocabulary."""
    if len(key) > MAX_KEYWORD_LENGTH:
        return None
    if (entry := _BY_HASH.get(keyword_hash(key))) is None:
        return None
    spelling, kw = entry
    return kw if spelling == key else None


def vocabulary() -> dict[str, Keyword]:
    return {spelling: kw for spelling, kw in _BY_HASH.values()}
