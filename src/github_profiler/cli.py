"""CLI interface for GitHub Profiler."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from github_profiler import __version__
from github_profiler.config import get_config
from github_profiler.exceptions import GitHubProfilerError
from github_profiler.output.console import Console as OutputConsole
from github_profiler.services.report import analyze_raw_records, generate_report

app = typer.Typer(
    name="github-profiler",
    help="Turn a developer's raw GitHub activity into a profile of metrics",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-profiler version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool, debug: bool) -> None:
    """Configure root logging from the CLI verbosity flags."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Profiler - Developer profile metrics from raw GitHub activity."""
    pass


@app.command()
def report(
    login: str = typer.Argument(..., help="GitHub login to profile"),
    raw_dir: Optional[Path] = typer.Option(
        None,
        "--raw-dir",
        "-r",
        help="Directory with raw records (default: <output>/raw)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report directory (default: out/<login>)",
    ),
    tz: Optional[str] = typer.Option(
        None,
        "--tz",
        help="Timezone for hour-based metrics: IANA name or +HH:MM offset",
    ),
    include_org_repos: Optional[bool] = typer.Option(
        None,
        "--include-org-repos/--no-include-org-repos",
        help="Count organization repositories as owned in the Uni Index",
    ),
    summary_only: bool = typer.Option(
        False,
        "--summary-only",
        help="Print summary only, don't write JSON files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Build the profile report for a GitHub user from raw records.

    Reads repos.jsonl, prs.jsonl, commits.jsonl, contributions.json,
    user_info.json and profile_readme.md, then writes profile.json and
    top_repos.json.

    Examples:
        github-profiler report torvalds
        github-profiler report torvalds --tz Europe/Helsinki
        github-profiler report torvalds --raw-dir data/torvalds --summary-only
    """
    setup_logging(verbose, debug)
    output_console = OutputConsole(verbose=verbose, quiet=quiet)

    try:
        config = get_config()
        if tz is not None:
            config = replace(config, tz_override=tz)
        if include_org_repos is not None:
            config = replace(config, include_org_repos=include_org_repos)

        out_dir = output or Path(config.output_dir) / login

        if summary_only:
            result = analyze_raw_records(login, raw_dir or out_dir / "raw", config=config)
        else:
            artifacts = generate_report(login, raw_dir=raw_dir, out_dir=out_dir, config=config)
            result = artifacts.result
    except GitHubProfilerError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)

    output_console.print_full_summary(result)

    if not summary_only:
        output_console.print_output_path(str(artifacts.profile_path))
        output_console.print_output_path(str(artifacts.top_repos_path))

    output_console.print_success("\nReport complete!")


@app.command()
def show_config():
    """Show the configuration resolved from the environment."""
    try:
        config = get_config()
    except GitHubProfilerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"Timezone override: {config.tz_override or '[dim]none (UTC)[/dim]'}")
    console.print(f"Count organization repos as owned: {config.include_org_repos}")
    console.print(f"Output directory: {config.output_dir}")


if __name__ == "__main__":
    app()
