"""CLI interface for conventionalcommit."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from conventionalcommit import config
from conventionalcommit.git.repository import GitRepository, GitRepositoryError
from conventionalcommit.message import Buffer, ConventionalCommitError, MessageParser
from conventionalcommit.models import Message
from conventionalcommit.text import Lines, RawMessage, decode


console = Console()


def read_message(source, strip_comments: bool = False) -> bytes:
    """Read raw message bytes from an open binary file.

    Args:
        source: Binary file object (a file or stdin)
        strip_comments: Drop "#" comment lines, as git does for commit-msg files

    Returns:
        Raw message bytes
    """
    data = source.read()
    if strip_comments:
        data = Lines.from_bytes(data).without_comments().to_bytes()
    return data


def message_table(msg: Message) -> Table:
    """Build a rich table of the main message fields."""
    table = Table(title="Commit Message", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Type", escape(msg.type))
    table.add_row("Scope", escape(msg.scope))
    table.add_row("Description", escape(msg.description))
    table.add_row("Body", escape(msg.body))
    table.add_row("Breaking", "[red]yes[/red]" if msg.is_breaking_change else "no")

    return table


def print_message(msg: Message) -> None:
    """Print a message as rich tables."""
    console.print(message_table(msg))

    if msg.footers:
        footer_table = Table(title="Footers")
        footer_table.add_column("Token", style="cyan")
        footer_table.add_column("Value", style="green")
        for footer in msg.footers:
            footer_table.add_row(escape(footer.name), escape(footer.value))
        console.print(footer_table)

    if msg.references:
        ref_table = Table(title="References")
        ref_table.add_column("Token", style="cyan")
        ref_table.add_column("Value", style="yellow")
        for ref in msg.references:
            ref_table.add_row(escape(ref.name), escape(ref.value))
        console.print(ref_table)

    if msg.breaking_changes:
        console.print("\n[bold red]Breaking changes:[/bold red]")
        for change in msg.breaking_changes:
            console.print(f"  - {escape(change)}")


@click.group()
@click.version_option()
def cli():
    """Conventionalcommit - Conventional Commits message parser."""
    pass


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(config.OUTPUT_FORMATS),
    default=config.DEFAULT_OUTPUT_FORMAT,
)
@click.option("--strip-comments", is_flag=True, help="Ignore lines starting with #")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def parse(source, output_format, strip_comments, verbose):
    """Parse a commit message from a file or stdin."""
    try:
        data = read_message(source, strip_comments=strip_comments)

        buffer = Buffer(data)
        if verbose:
            console.print(
                f"[dim]Read {len(buffer.all_lines)} lines: "
                f"head {buffer.head_length}, foot {buffer.foot_length}[/dim]"
            )

        msg = MessageParser().parse_buffer(buffer)

        if output_format == "json":
            click.echo(json.dumps(msg.to_dict(), indent=2))
        else:
            print_message(msg)

    except ConventionalCommitError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--strip-comments", is_flag=True, help="Ignore lines starting with #")
def normalize(source, strip_comments):
    """Print a message without leading and trailing blank lines."""
    data = read_message(source, strip_comments=strip_comments)
    stdout = click.get_binary_stream("stdout")
    stdout.write(Buffer(data).to_bytes())
    stdout.flush()


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--strip-comments", is_flag=True, help="Ignore lines starting with #")
def paragraphs(source, strip_comments):
    """List the paragraphs of a message."""
    raw = RawMessage.from_bytes(read_message(source, strip_comments=strip_comments))

    if not raw.paragraphs:
        console.print("[yellow]No paragraphs found.[/yellow]")
        return

    for n, paragraph in enumerate(raw.paragraphs, start=1):
        console.print(
            f"[bold]Paragraph {n}[/bold] "
            f"[dim](lines {paragraph.first_number}-{paragraph.last_number})[/dim]"
        )
        for line in paragraph.lines:
            console.print(f"  {escape(decode(line.content))}")


@cli.command()
@click.argument("repo_path", type=click.Path(exists=True))
@click.option("--rev", help="Revision to start from (default: HEAD)")
@click.option(
    "-n",
    "--max-count",
    type=int,
    default=config.LOG_MAX_COUNT,
    help="Maximum number of commits",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(config.OUTPUT_FORMATS),
    default=config.DEFAULT_OUTPUT_FORMAT,
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def log(repo_path, rev, max_count, output_format, verbose):
    """Parse the commit messages of a repository."""
    try:
        if verbose:
            console.print(f"Opening repository: {repo_path}")
        repo = GitRepository(repo_path)

        commits = list(repo.parse_commits(rev=rev, max_count=max_count))

        if not commits:
            console.print("[yellow]No commits found matching criteria.[/yellow]")
            return

        if verbose:
            console.print(f"Parsed {len(commits)} commits")

        if output_format == "json":
            data = [{"sha": sha, **msg.to_dict()} for sha, msg in commits]
            click.echo(json.dumps(data, indent=2))
            return

        table = Table(title=f"Commits: {repo.name}")
        table.add_column("SHA", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Scope", style="magenta")
        table.add_column("Breaking")
        table.add_column("Description", style="green")

        for sha, msg in commits:
            table.add_row(
                sha[:8],
                escape(msg.type),
                escape(msg.scope),
                "[red]yes[/red]" if msg.is_breaking_change else "",
                escape(msg.description),
            )

        console.print(table)

    except GitRepositoryError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)
