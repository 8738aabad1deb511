## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘

import pytest

import profargs.api as P


def test_parse_returns_populated_record():
    args = P.parse("start,event=cpu,interval=10ms,file=out.html")
    assert isinstance(args, P.Arguments)
    assert args.action == P.Action.START
    assert args.output == P.Output.FLAMEGRAPH
    assert args.events == P.EventKind.CPU
    assert args.interval == 10_000_000


def test_parse_none_gives_defaults():
    args = P.parse(None)
    assert args.action == P.Action.NONE


def test_errors_are_exposed():
    with pytest.raises(P.ArgumentsError, match="Invalid interval"):
        P.parse("interval=soon")
