## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import re
from enum import Enum, Flag

from .arguments import Arguments
from .types import UNLIMITED


OPTION_REFERENCE: list[tuple[str, str]] = [
    ('start', "start profiling"),
    ('resume', "start or resume profiling, keeping the data collected so far"),
    ('stop', "stop profiling"),
    ('check', "check whether the requested event is available"),
    ('status', "print whether profiling is running, and for how long"),
    ('list', "list the available profiling events"),
    ('version[=full]', "print the agent version"),
    ('event=EVENT', "event to sample: cpu, alloc, lock, or a hardware event name"),
    ('collapsed[=C]', "dump collapsed stacks, as read by FlameGraph scripts (alias: folded)"),
    ('flamegraph[=C]', "write an HTML Flame Graph (alias: html)"),
    ('tree[=C]', "write an HTML call tree; C is the counter, `samples` or `total`"),
    ('jfr', "dump events in Java Flight Recorder format"),
    ('flat[=N]', "dump the top N methods, all of them without N"),
    ('interval=N', "sampling interval with optional unit: 10ms, 500us, 1s (default: 10ms)"),
    ('jstackdepth=N', "maximum Java stack depth (default: 2048)"),
    ('safemode=BITS', "disable stack recovery techniques (default: 0, all enabled)"),
    ('file=FILENAME', "output file; %p is the pid and %t the timestamp"),
    ('filter=FILTER', "thread filter"),
    ('include=PATTERN', "keep only stack traces containing PATTERN (repeatable)"),
    ('exclude=PATTERN', "drop stack traces containing PATTERN (repeatable)"),
    ('threads', "profile threads separately"),
    ('allkernel', "only kernel-mode events"),
    ('alluser', "only user-mode events"),
    ('cstack=MODE', "native stack walking: fp, lbr or no"),
    ('simple', "simple class names instead of fully qualified ones"),
    ('dot', "dotted class names"),
    ('sig', "print method signatures"),
    ('ann', "annotate Java method names"),
    ('begin=FUNCTION', "start profiling when FUNCTION executes"),
    ('end=FUNCTION', "stop profiling when FUNCTION executes"),
    ('title=TITLE', "Flame Graph title"),
    ('minwidth=PCT', "Flame Graph minimum frame width, in percent"),
    ('reverse', "stack-reversed Flame Graph or call tree"),
]

FIELDS = ('action', 'output', 'counter', 'events', 'event_description', 'interval', 'jstack_depth',
          'safe_mode', 'file', 'filter', 'include_patterns', 'exclude_patterns', 'threads', 'ring',
          'cstack', 'style', 'begin', 'end', 'title', 'min_width', 'reverse', 'flat_limit')

# Fields where UNLIMITED stands for "no limit" rather than a number.
UNLIMITED_FIELDS = ('flat_limit', 'safe_mode')


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_value(it) -> str:
    if isinstance(it, Flag):
        return '|'.join(m.name for m in type(it) if m in it) or '-'
    if isinstance(it, Enum): return it.name.lower()
    if isinstance(it, bool): return str(it).lower()
    if isinstance(it, tuple): return '[' + ', '.join(format_value(i) for i in it) + ']'
    if isinstance(it, str): return '"' + it.replace('"', '\\"') + '"'
    if it is None: return '-'
    return str(it)


def format_field(args: Arguments, name: str) -> str:
    value = getattr(args, name)
    if name in UNLIMITED_FIELDS and value == UNLIMITED: return 'unlimited'
    return format_value(value)


def format_arguments(args: Arguments) -> str:
    width = max(len(f) for f in FIELDS)
    return '\n'.join(f"{name:<{width}}  \033[97m{format_field(args, name)}\033[0m" for name in FIELDS)


def format_reference() -> str:
    width = max(len(syntax) for syntax, _ in OPTION_REFERENCE)
    return '\n'.join(f"  \033[97m{syntax:<{width}}\033[0m  {text}" for syntax, text in OPTION_REFERENCE)


def format_option_context(source: str, offset: int | None, token: str | None) -> str:
    """Echo the option string with the failing option highlighted."""
    if offset is None or not token:
        return f"    \033[90m{source}\033[0m"
    return ("    \033[90m" + source[:offset] + "\033[0m"
            + f"\033[48;5;30m\033[1;97m{source[offset:offset+len(token)]}\033[0m"
            + "\033[90m" + source[offset+len(token):] + "\033[0m")
