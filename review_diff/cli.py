"""CLI commands and entry point."""

import asyncio
import json
import os

import click

from .config import __version__
from .context import get_git_context
from .git import DiffType, get_current_branch, get_default_branch, run_git_diff
from .ui import format_diff_options, format_diff_summary


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-C",
    "--repo",
    default=".",
    show_default=True,
    type=click.Path(exists=True, file_okay=False),
    help="Repository working directory",
)
@click.pass_context
def cli(ctx, repo):
    """Review-diff: collect git diffs for code review."""
    ctx.obj = os.path.abspath(repo)


@cli.command()
@click.pass_obj
def branch(cwd):
    """Print the current branch."""
    click.echo(asyncio.run(get_current_branch(cwd)))


@cli.command(name="default-branch")
@click.pass_obj
def default_branch(cwd):
    """Print the repository's default branch."""
    click.echo(asyncio.run(get_default_branch(cwd)))


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the context as JSON")
@click.pass_obj
def context(cwd, as_json):
    """Show branches and the available diff options."""
    ctx = asyncio.run(get_git_context(cwd))
    if as_json:
        click.echo(json.dumps(ctx, indent=2))
        return

    click.echo(f"Current branch: {ctx['current_branch']}")
    click.echo(f"Default branch: {ctx['default_branch']}")
    click.echo(format_diff_options(ctx["diff_options"]))


@cli.command()
@click.argument("diff_type", required=False, default=DiffType.UNCOMMITTED.value)
@click.option("--default-branch", "base", default=None, help="Base branch for the 'branch' diff")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--summary", is_flag=True, help="Only print the label and file count")
@click.pass_obj
def diff(cwd, diff_type, base, as_json, summary):
    """Print the diff for DIFF_TYPE (uncommitted, staged, unstaged, last-commit, branch)."""
    result = asyncio.run(run_git_diff(diff_type, default_branch=base, cwd=cwd))
    if as_json:
        click.echo(json.dumps(result, indent=2))
        return
    if summary:
        click.echo(format_diff_summary(result))
        return

    click.secho(result["label"], fg="cyan", bold=True, err=True)
    if result["patch"]:
        click.echo(result["patch"])


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
