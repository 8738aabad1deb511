## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

from .types import Action, Output, Counter, EventKind, Ring, CStack, Style, UNLIMITED
from .errors import *
from .arguments import Arguments


def parse(options: str | None) -> Arguments:
    args = Arguments()
    args.parse(options)
    return args
