## profargs — CLI integration tests

import os, sys
import subprocess


def run_cli(*cli_args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "profargs", "--plain", *cli_args]
    merged_env = os.environ.copy()
    merged_env.pop("PROFARGS_OPTIONS", None)
    merged_env.pop("PROFARGS_DEBUG", None)
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def _table(output: str) -> dict[str, str]:
    return dict(line.split(None, 1) for line in output.splitlines() if line.strip())


def test_cli_prints_parsed_configuration():
    result = run_cli("start,event=cpu,interval=1ms,file=out.html")
    assert result.returncode == 0
    table = _table(result.stdout)
    assert table["action"] == "start"
    assert table["output"] == "flamegraph"
    assert table["event_description"] == '"cpu"'
    assert table["interval"] == "1000000"
    assert table["flat_limit"] == "200"


def test_cli_joins_multiple_strings():
    result = run_cli("include=a", "include=b,threads")
    assert result.returncode == 0
    table = _table(result.stdout)
    assert table["include_patterns"] == '["a", "b"]'
    assert table["threads"] == "true"


def test_cli_reports_invalid_arguments():
    result = run_cli("event=cpu,event=wall")
    assert result.returncode == 1
    out = result.stdout
    assert "INVALID ARGUMENTS." in out
    assert "multiple incompatible events" in out
    assert "event=cpu,event=wall" in out


def test_cli_reads_options_from_environment():
    result = run_cli(env={"PROFARGS_OPTIONS": "list"})
    assert result.returncode == 0
    assert _table(result.stdout)["action"] == "list"


def test_cli_without_options_is_usage_error():
    result = run_cli()
    assert result.returncode == 2
    assert "PROFARGS_OPTIONS" in result.stdout + result.stderr


def test_cli_reference_lists_options():
    result = run_cli("--reference")
    assert result.returncode == 0
    assert "jstackdepth=N" in result.stdout
    assert "minwidth=PCT" in result.stdout


def test_cli_debug_logs_ignored_options():
    result = run_cli("-vv", "bogus,start")
    assert result.returncode == 0
    assert "Ignoring unknown option `bogus`" in result.stdout
