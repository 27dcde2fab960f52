from __future__ import annotations

from pathlib import Path

import typer

from fileassert.assertions import AssertionResult, InvalidArgumentsError
from fileassert.config import PathDisplay

app = typer.Typer(name="fileassert", help="Assert filesystem state from tests and scripts")

_state: dict = {"display": PathDisplay(), "logger": None}


@app.callback()
def main(
    path_remove: str = typer.Option(
        "",
        "--path-remove",
        envvar="FILEASSERT_PATH_REMOVE",
        help="Path text to replace in diagnostics",
    ),
    path_add: str = typer.Option(
        "",
        "--path-add",
        envvar="FILEASSERT_PATH_ADD",
        help="Replacement for --path-remove in diagnostics",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Each command exits 0 when the assertion holds and 1 when it fails."""
    from fileassert.verbose import setup_logger

    _state["display"] = PathDisplay(remove=path_remove, add=path_add)
    _state["logger"] = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
        logger_name="fileassert.cli",
    )


def _report(result: AssertionResult) -> None:
    if not result.passed:
        typer.echo(result.diagnostic, err=True, nl=False)
    raise typer.Exit(result.status)


def _run(check, *args) -> None:
    try:
        result = check(*args, display=_state["display"], logger=_state["logger"])
    except InvalidArgumentsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    _report(result)


@app.command()
def exists(path: str = typer.Argument(help="File or directory path")):
    """Fail if the path does not exist."""
    from fileassert.assertions import check_file_exists

    _run(check_file_exists, path)


@app.command("not-exists")
def not_exists(path: str = typer.Argument(help="File or directory path")):
    """Fail if the path exists."""
    from fileassert.assertions import check_file_not_exists

    _run(check_file_not_exists, path)


@app.command()
def empty(path: str = typer.Argument(help="File path")):
    """Fail if the file is not empty."""
    from fileassert.assertions import check_file_empty

    _run(check_file_empty, path)


@app.command("not-empty")
def not_empty(path: str = typer.Argument(help="File path")):
    """Fail if the file is empty or missing."""
    from fileassert.assertions import check_file_not_empty

    _run(check_file_not_empty, path)


@app.command()
def contains(
    path: str = typer.Argument(help="File path"),
    regex: str = typer.Argument(help="Regular expression to search for"),
):
    """Fail if no part of the file matches the regex."""
    from fileassert.assertions import check_file_contains

    _run(check_file_contains, path, regex)


@app.command("not-contains")
def not_contains(
    path: str = typer.Argument(help="File path"),
    regex: str = typer.Argument(help="Regular expression that must not match"),
):
    """Fail if any part of the file matches the regex."""
    from fileassert.assertions import check_file_not_contains

    _run(check_file_not_contains, path, regex)


@app.command("size-equals")
def size_equals(
    path: str = typer.Argument(help="File path"),
    size: str = typer.Argument(help="Expected size in bytes"),
):
    """Fail if the file size differs from the expected byte count."""
    from fileassert.assertions import check_file_size_equals

    _run(check_file_size_equals, path, size)


@app.command()
def check(
    config: str = typer.Argument(help="Path to assertion suite YAML"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report here"),
):
    """Run every assertion in a YAML suite and report failures."""
    from pydantic import ValidationError

    from fileassert.config import load_config
    from fileassert.reporting.junit import write_junit
    from fileassert.suite import run_suite

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(2)

    try:
        suite = load_config(config_path)
        # Command-line rewriting wins over the suite's own
        if _state["display"].remove:
            suite.path_display = _state["display"]
        results = run_suite(suite, logger=_state["logger"])
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    for result in results:
        if not result.passed:
            typer.echo(result.diagnostic, err=True, nl=False)

    failed = sum(1 for r in results if not r.passed)
    typer.echo(f"{len(results) - failed} passed, {failed} failed")

    if junit:
        report_path = write_junit(results, Path(junit), suite_name=suite.name)
        typer.echo(f"Report: {report_path}")

    if failed:
        raise typer.Exit(1)
