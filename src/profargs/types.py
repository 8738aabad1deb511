## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

from enum import IntEnum, IntFlag


# Reserved after the copied option string, so `file=` patterns can be expanded in the same buffer.
EXTRA_BUF_SIZE = 512

# Stands for "no limit" in flat=, safemode= and friends; same as C's INT_MAX.
UNLIMITED = 0x7fffffff

DEFAULT_INTERVAL = 10_000_000
DEFAULT_JSTACKDEPTH = 2048
DEFAULT_TITLE = "Flame Graph"
DEFAULT_FLAT_FOR_FILE = 200

EVENT_ALLOC = "alloc"
EVENT_LOCK = "lock"


class Action(IntEnum):
    NONE = 0
    START = 1
    RESUME = 2
    STOP = 3
    CHECK = 4
    STATUS = 5
    LIST = 6
    VERSION = 7
    FULL_VERSION = 8
    DUMP = 9


class Output(IntEnum):
    NONE = 0
    COLLAPSED = 1
    FLAMEGRAPH = 2
    TREE = 3
    JFR = 4
    FLAT = 5


class Counter(IntEnum):
    SAMPLES = 0
    TOTAL = 1


class EventKind(IntFlag):
    CPU = 1
    ALLOC = 2
    LOCK = 4


class Ring(IntEnum):
    ANY = 0
    KERNEL = 1
    USER = 2


class CStack(IntEnum):
    FRAME_POINTER = 0
    LBR = 1
    NONE = 2


class Style(IntFlag):
    SIMPLE = 1
    DOTTED = 2
    SIGNATURES = 4
    ANNOTATE = 8
