## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import os
import time

from .types import Output, EXTRA_BUF_SIZE


# Longest expanded file name the reserved tail holds, after the copied string's terminator and its own.
FILE_PATTERN_LIMIT = EXTRA_BUF_SIZE - 2

OUTPUT_EXTENSIONS: dict[str, Output] = {
    '.html': Output.FLAMEGRAPH,
    '.jfr': Output.JFR,
    '.collapsed': Output.COLLAPSED,
    '.folded': Output.COLLAPSED,
}


def _timestamp() -> str:
    return time.strftime('%Y%m%d-%H%M%S', time.localtime())


def expand_file_pattern(pattern: str, limit: int = FILE_PATTERN_LIMIT) -> str:
    """Expand `%p` to the process id and `%t` to the local time as YYYYMMDD-HHMMSS.

    Any other `%x` becomes a literal `x` and a trailing `%` is dropped.  The result is
    cut at `limit` characters, even in the middle of an expansion.
    """
    out, size, i = [], 0, 0
    while size < limit and i < len(pattern):
        c = pattern[i]; i += 1
        if c == '%':
            if i == len(pattern):
                break
            c = pattern[i]; i += 1
            if c == 'p':
                c = str(os.getpid())
            elif c == 't':
                c = _timestamp()
        piece = c[:limit - size]
        out.append(piece)
        size += len(piece)
    return ''.join(out)


def detect_output_format(filename: str) -> Output:
    """Pick the output format from the last extension of `filename`, defaulting to a flat profile."""
    dot = filename.rfind('.')
    if dot < 0:
        return Output.FLAT
    return OUTPUT_EXTENSIONS.get(filename[dot:], Output.FLAT)
