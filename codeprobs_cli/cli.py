"""Command-line interface for codeprobs-cli."""

from pathlib import Path
from typing import Optional

import click

from . import __version__
from .client import CodeprobsClient, Credentials
from .config import GlobalConfig, ProblemMarker, resolve_server
from .config.global_config import default_path, normalize_server
from .errors import AnswerFileError, UnknownLanguageError
from .utils.terminal import (
    console,
    leaderboard_table,
    print_answer,
    print_outcome,
)


INSTRUCTIONS = """\
How to get the coding problems:

1. Clone the problem repository:
     git clone https://github.com/PixelSam123/codeprobs
2. Each problem lives in its own directory, which contains a
   problem statement and a .codeprob_info.json file naming the
   problem id on the server.
3. Write your answer in that directory, then run from inside it:
     codeprobs answer post <file> <name> <password>
4. See what others submitted with:
     codeprobs answer get
"""

LANGUAGES_BY_SUFFIX = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".rs": "rust",
    ".go": "go",
    ".java": "java",
    ".c": "c",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cs": "csharp",
    ".rb": "ruby",
    ".kt": "kotlin",
    ".lua": "lua",
}


def infer_language(path: Path) -> str:
    """Guess the answer language from the file extension."""
    language = LANGUAGES_BY_SUFFIX.get(path.suffix.lower())
    if language is None:
        raise UnknownLanguageError(
            f"Cannot tell the language of {path.name}; pass it with --language"
        )
    return language


def read_answer_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AnswerFileError(f"Cannot read answer file {path}: {e}") from e


def make_client(ctx: click.Context) -> CodeprobsClient:
    """Build a client from the global options stored on the context."""
    obj = ctx.ensure_object(dict)
    server, _ = resolve_server(obj.get("server"))
    return CodeprobsClient(server, debug=obj.get("debug", False))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--server",
    envvar="CODEPROBS_SERVER",
    help="Server base URL (default: from ~/.codeprobs.global)",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, server: Optional[str], debug: bool):
    """codeprobs - companion app for the codeprobs coding problems."""
    obj = ctx.ensure_object(dict)
    obj["server"] = server
    obj["debug"] = debug


@cli.group()
def user():
    """Fetch or post (sign up) users to the server."""
    pass


@user.command(name="get")
@click.pass_context
def user_get(ctx: click.Context):
    """Fetch all users in a leaderboard format."""
    client = make_client(ctx)
    users = client.get_users()
    console.print(leaderboard_table(users))


@user.command(name="post")
@click.argument("name")
@click.argument("password")
@click.pass_context
def user_post(ctx: click.Context, name: str, password: str):
    """Sign up a user."""
    client = make_client(ctx)
    outcome = client.sign_up(Credentials(name, password))
    print_outcome(outcome)


@cli.group()
def problem():
    """Instructions for obtaining the coding problems."""
    pass


@problem.command(name="instructions")
def problem_instructions():
    """Print instructions for obtaining the coding problems."""
    console.print(INSTRUCTIONS, markup=False, highlight=False, emoji=False)


@cli.group()
def answer():
    """Fetch, post or delete answers on the server."""
    pass


@answer.command(name="get")
@click.pass_context
def answer_get(ctx: click.Context):
    """Get answers for the problem in the current directory."""
    marker = ProblemMarker.load()
    client = make_client(ctx)
    answers = client.get_answers(marker.id)

    if not answers:
        console.print("[yellow]No answers yet.[/yellow]")
        return

    for item in answers:
        print_answer(item)


@answer.command(name="post")
@click.argument("filename", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("name")
@click.argument("password")
@click.option(
    "-l",
    "--language",
    help="Answer language (default: inferred from the file extension)",
)
@click.pass_context
def answer_post(
    ctx: click.Context,
    filename: Path,
    name: str,
    password: str,
    language: Optional[str],
):
    """Post answer for the problem in the current directory."""
    marker = ProblemMarker.load()
    if language is None:
        language = infer_language(filename)
    content = read_answer_file(filename)

    client = make_client(ctx)
    outcome = client.post_answer(marker.id, language, content, Credentials(name, password))
    print_outcome(outcome)


@answer.command(name="delete")
@click.argument("answer_id", type=int)
@click.argument("name")
@click.argument("password")
@click.pass_context
def answer_delete(ctx: click.Context, answer_id: int, name: str, password: str):
    """Delete one of your answers by id."""
    client = make_client(ctx)
    outcome = client.delete_answer(answer_id, Credentials(name, password))
    print_outcome(outcome)


@cli.group()
def config():
    """Show or change the server this client talks to."""
    pass


@config.command(name="show")
@click.pass_context
def config_show(ctx: click.Context):
    """Display the server URL in use and where it comes from."""
    server, source = resolve_server(ctx.ensure_object(dict).get("server"))
    console.print(f"[bold cyan]Server:[/bold cyan] {server} ({source})")
    console.print(f"[bold cyan]Config file:[/bold cyan] {default_path()}")


@config.command(name="set-server")
@click.argument("url")
def config_set_server(url: str):
    """Save the default server URL to ~/.codeprobs.global."""
    global_config = GlobalConfig.load()
    global_config.server = normalize_server(url)
    global_config.save()
    console.print(f"[green]Default server set to: {global_config.server}[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
