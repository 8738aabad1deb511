## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘
#
# profargs — Parser for the comma-separated option strings of a profiling agent.
#

import logging

from .types import Action, Output, Counter, EventKind, Ring, CStack, Style
from .types import EXTRA_BUF_SIZE, UNLIMITED, DEFAULT_INTERVAL, DEFAULT_JSTACKDEPTH, DEFAULT_TITLE, DEFAULT_FLAT_FOR_FILE
from .types import EVENT_ALLOC, EVENT_LOCK
from .errors import ArgumentsValueError, ArgumentsMemoryError
from .keywords import Keyword, match_keyword
from .parser import Option, tokenize
from .units import parse_units, parse_int, parse_float
from .filenames import expand_file_pattern, detect_output_format


logger = logging.getLogger(__name__)


class Buffer:
    """Working copy of one option string, which also holds the values of repeatable options.

    Values are kept most recent first.  Once released the buffer is empty for every
    record that still refers to it.
    """

    def __init__(self, text: str, extra: int = EXTRA_BUF_SIZE):
        self.text: str | None = text
        self.capacity = len(text) + extra
        self.lists: dict[str, list[str]] = {'include': [], 'exclude': []}

    @property
    def released(self) -> bool:
        return self.text is None

    @property
    def tail(self) -> int:
        """Longest expanded file name that fits after the copied string, counting both terminators."""
        return self.capacity - len(self.text) - 2 if self.text is not None else 0

    def append(self, name: str, value: str) -> None:
        self.lists[name].insert(0, value)

    def values(self, name: str) -> tuple[str, ...]:
        return tuple(self.lists[name])

    def release(self) -> None:
        self.text = None
        for values in self.lists.values():
            values.clear()

    def __repr__(self):
        return f"<Buffer capacity={self.capacity}{' released' if self.released else ''}>"


class Arguments:
    """Configuration of one profiling session, filled in from an option string by `parse()`.

    The record owns the buffer of its last parse unless `save()` handed that buffer over
    to another record, in which case this one is marked as `shared`.
    """

    def __init__(self):
        self._buffer: Buffer | None = None
        self._shared = False

        self.action = Action.NONE
        self.output = Output.NONE
        self.counter = Counter.SAMPLES
        self.events = EventKind(0)
        self.event_description: str | None = None
        self.interval = DEFAULT_INTERVAL
        self.jstack_depth = DEFAULT_JSTACKDEPTH
        self.safe_mode = 0
        self.file: str | None = None
        self.filter: str | None = None
        self.threads = False
        self.ring = Ring.ANY
        self.cstack = CStack.FRAME_POINTER
        self.style = Style(0)
        self.begin: str | None = None
        self.end: str | None = None
        self.title = DEFAULT_TITLE
        self.min_width = 0.0
        self.reverse = False
        self.flat_limit = 0

    # Buffer ownership ────────────────────────────────────────────────────────────────────────
    @property
    def shared(self) -> bool:
        return self._shared

    @property
    def buffer(self) -> Buffer | None:
        return self._buffer

    def _release_owned(self) -> None:
        if self._buffer is not None and not self._shared:
            logger.debug("Releasing %r.", self._buffer)
            self._buffer.release()

    def save(self, other: "Arguments") -> None:
        """Take over all fields of `other` along with its buffer, leaving `other` as a shared view."""
        if other is self:
            return
        self._release_owned()
        self.__dict__.update(other.__dict__)
        other._shared = True

    def close(self) -> None:
        self._release_owned()
        self._buffer = None

    def __enter__(self) -> "Arguments":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Repeatable options ──────────────────────────────────────────────────────────────────────
    @property
    def include_patterns(self) -> tuple[str, ...]:
        return tuple(reversed(self._buffer.values('include'))) if self._buffer else ()

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        return tuple(reversed(self._buffer.values('exclude'))) if self._buffer else ()

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def parse(self, args: str | None) -> None:
        """Apply every option of `args` to this record, raising `ArgumentsError` on the first invalid one."""
        if args is None:
            return

        self._release_owned()
        try:
            self._buffer = Buffer(args)
        except MemoryError:
            self._buffer = None
            raise ArgumentsMemoryError("Not enough memory to parse arguments") from None
        self._shared = False

        for option in tokenize(args):
            self._apply(option)

        if self.file is not None and '%' in self.file:
            self.file = expand_file_pattern(self.file, self._buffer.tail)
            logger.debug("Expanded file pattern to `%s`.", self.file)

        if self.file is not None and self.output == Output.NONE:
            self.output = detect_output_format(self.file)
            self.flat_limit = DEFAULT_FLAT_FOR_FILE
            logger.debug("Output format %s inferred from `%s`.", self.output.name, self.file)

        if self.output != Output.NONE and self.action in (Action.NONE, Action.STOP):
            self.action = Action.DUMP

    def _apply(self, option: Option) -> None:
        key, value = option.key, option.value

        def fail(message: str):
            return ArgumentsValueError(message, token=key if value is None else f"{key}={value}", offset=option.offset)

        match match_keyword(key):
            # Actions
            case Keyword.START:
                self.action = Action.START
            case Keyword.RESUME:
                self.action = Action.RESUME
            case Keyword.STOP:
                self.action = Action.STOP
            case Keyword.CHECK:
                self.action = Action.CHECK
            case Keyword.STATUS:
                self.action = Action.STATUS
            case Keyword.LIST:
                self.action = Action.LIST
            case Keyword.VERSION:
                self.action = Action.VERSION if value is None else Action.FULL_VERSION

            # Output formats
            case Keyword.COLLAPSED:
                self.output, self.counter = Output.COLLAPSED, _counter(value)
            case Keyword.FLAMEGRAPH:
                self.output, self.counter = Output.FLAMEGRAPH, _counter(value)
            case Keyword.TREE:
                self.output, self.counter = Output.TREE, _counter(value)
            case Keyword.JFR:
                self.output = Output.JFR
            case Keyword.FLAT:
                self.output = Output.FLAT
                self.flat_limit = UNLIMITED if value is None else parse_int(value)

            # Basic options
            case Keyword.EVENT:
                if not value:
                    raise fail("event must not be empty")
                if not self.add_event(value):
                    raise fail("multiple incompatible events")
            case Keyword.INTERVAL:
                if value is None or (interval := parse_units(value)) <= 0:
                    raise fail("Invalid interval")
                self.interval = interval
            case Keyword.JSTACKDEPTH:
                if value is None or (depth := parse_int(value)) <= 0:
                    raise fail("jstackdepth must be > 0")
                self.jstack_depth = depth
            case Keyword.SAFEMODE:
                self.safe_mode = UNLIMITED if value is None else parse_int(value)
            case Keyword.FILE:
                if not value:
                    raise fail("file must not be empty")
                self.file = value

            # Filters
            case Keyword.FILTER:
                self.filter = '' if value is None else value
            case Keyword.INCLUDE:
                if value is not None: self._buffer.append('include', value)
            case Keyword.EXCLUDE:
                if value is not None: self._buffer.append('exclude', value)
            case Keyword.THREADS:
                self.threads = True
            case Keyword.ALLKERNEL:
                self.ring = Ring.KERNEL
            case Keyword.ALLUSER:
                self.ring = Ring.USER
            case Keyword.CSTACK:
                if value is not None:
                    self.cstack = _cstack_mode(value)

            # Output style modifiers
            case Keyword.SIMPLE:
                self.style |= Style.SIMPLE
            case Keyword.DOT:
                self.style |= Style.DOTTED
            case Keyword.SIG:
                self.style |= Style.SIGNATURES
            case Keyword.ANN:
                self.style |= Style.ANNOTATE
            case Keyword.BEGIN:
                self.begin = value
            case Keyword.END:
                self.end = value

            # FlameGraph options
            case Keyword.TITLE:
                if value is not None: self.title = value
            case Keyword.MINWIDTH:
                if value is not None: self.min_width = parse_float(value)
            case Keyword.REVERSE:
                self.reverse = True

            case None:
                logger.debug("Ignoring unknown option `%s` at offset %d.", key, option.offset)

    def add_event(self, event: str) -> bool:
        """Merge `event` into the event set; False if it is a second CPU-class event."""
        if event == EVENT_ALLOC:
            self.events |= EventKind.ALLOC
        elif event == EVENT_LOCK:
            self.events |= EventKind.LOCK
        else:
            if self.events & EventKind.CPU:
                return False
            self.events |= EventKind.CPU
            self.event_description = event
        return True

    def __repr__(self):
        return f"<Arguments action={self.action.name} output={self.output.name} events={self.events!r}{' shared' if self._shared else ''}>"


def _counter(value: str | None) -> Counter:
    return Counter.SAMPLES if value is None or value == 'samples' else Counter.TOTAL


def _cstack_mode(value: str) -> CStack:
    match value[:1]:
        case 'n': return CStack.NONE
        case 'l': return CStack.LBR
        case _: return CStack.FRAME_POINTER
