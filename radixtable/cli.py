# radixtable/cli.py
import json
import shlex
from pathlib import Path
from typing import Any, Optional
import click
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from radixtable.config import CONFIG
from radixtable.logging import get_logger, set_level
from radixtable.tables.manager import TableManager
from radixtable.utils.files import FileOperationError
from radixtable.utils.trie import Node

logger = get_logger("cli")

class AliasedGroup(click.Group):
    COMMAND_ALIASES = {
        "a": "add", "rm": "remove", "g": "get", "l": "lookup",
        "ls": "list", "i": "interactive",
    }

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.COMMAND_ALIASES.get(cmd_name, cmd_name))

def parse_value(raw: str, as_json: bool) -> Any:
    if not as_json:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="VALUE")

def format_value(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)

def format_tree(node: Node, indent: int = 0) -> list:
    """Render the node structure, one edge per line."""
    lines = []
    for child in node.children.values():
        mark = f" = {format_value(child.value[1])}" if child.has_value else ""
        lines.append(" " * indent + f"├─ {child.prefix}{mark}")
        lines.extend(format_tree(child, indent + 2))
    return lines

@click.group(cls=AliasedGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--table", "table_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Table file (defaults to RADIXTABLE_TABLE_FILE)")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, table_path: Optional[Path], verbose: bool):
    """Radix Table CLI - store values under keys and look them up by prefix."""
    if verbose:
        set_level("debug")
    ctx.obj = TableManager(table_path)

@cli.command()
@click.argument("key")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Parse VALUE as JSON")
@click.pass_obj
def add(manager: TableManager, key: str, value: str, as_json: bool) -> None:
    """Store VALUE under KEY."""
    try:
        depth = manager.add(key, parse_value(value, as_json))
    except FileOperationError as e:
        raise click.ClickException(str(e))
    click.echo(f"Added {key} (depth {depth})")

@cli.command()
@click.argument("key")
@click.pass_obj
def remove(manager: TableManager, key: str) -> None:
    """Remove the value stored under KEY."""
    try:
        removed = manager.remove(key)
    except FileOperationError as e:
        raise click.ClickException(str(e))
    if not removed:
        click.echo(f"Not found: {key}")
        raise SystemExit(1)
    click.echo(f"Removed {key}")

@cli.command()
@click.argument("key")
@click.pass_obj
def get(manager: TableManager, key: str) -> None:
    """Print the value stored under exactly KEY."""
    if key not in manager.tree:
        click.echo(f"Not found: {key}")
        raise SystemExit(1)
    click.echo(format_value(manager.get(key)))

@cli.command()
@click.argument("key")
@click.pass_obj
def lookup(manager: TableManager, key: str) -> None:
    """Print the entry with the longest key that prefixes KEY."""
    found = manager.lookup(key)
    if found is None:
        click.echo(f"No prefix of {key} found")
        raise SystemExit(1)
    matched, value = found
    click.echo(f"{matched} -> {format_value(value)}")

@cli.command("list")
@click.option("-t", "--tree", is_flag=True, help="Display the radix tree structure")
@click.pass_obj
def list_entries(manager: TableManager, tree: bool) -> None:
    """List all entries."""
    entries = manager.list_entries()
    if not entries:
        click.echo("No entries found.")
        return
    if tree:
        click.echo("Radix Tree:")
        for line in format_tree(manager.tree.root):
            click.echo(line)
        return
    for key, value in entries:
        click.echo(f"{key} -> {format_value(value)}")

INTERACTIVE_COMMANDS = ["add", "remove", "get", "lookup", "list", "help", "exit"]

def run_line(manager: TableManager, line: str) -> str:
    """Execute one interactive command and return its output."""
    parts = shlex.split(line)
    if not parts:
        return ""
    name, args = parts[0], parts[1:]
    if name == "help":
        return "Commands: add KEY VALUE | remove KEY | get KEY | lookup KEY | list | exit"
    if name == "list":
        return "\n".join(f"{k} -> {format_value(v)}" for k, v in manager.list_entries()) or "No entries found."
    if name == "add" and len(args) == 2:
        return f"Added {args[0]} (depth {manager.add(args[0], args[1])})"
    if name == "remove" and len(args) == 1:
        return f"Removed {args[0]}" if manager.remove(args[0]) else f"Not found: {args[0]}"
    if name == "get" and len(args) == 1:
        return format_value(manager.get(args[0])) if args[0] in manager.tree else f"Not found: {args[0]}"
    if name == "lookup" and len(args) == 1:
        found = manager.lookup(args[0])
        return f"{found[0]} -> {format_value(found[1])}" if found else f"No prefix of {args[0]} found"
    return f"Unknown command: {line}. Type 'help' for commands."

@cli.command()
@click.pass_obj
def interactive(manager: TableManager) -> None:
    """Start an interactive session on the table."""
    CONFIG.ensure_exists()
    session = PromptSession(
        "radix> ",
        completer=WordCompleter(INTERACTIVE_COMMANDS, ignore_case=True),
        complete_while_typing=True,
        history=FileHistory(str(CONFIG.history_file)),
    )
    click.echo("Interactive session started. Type 'help' for commands, 'exit' or Ctrl+D to quit.")
    while True:
        try:
            line = session.prompt().strip()
        except (EOFError, KeyboardInterrupt):
            break
        if line == "exit":
            break
        try:
            output = run_line(manager, line)
        except (ValueError, FileOperationError) as e:
            logger.error(f"Interactive error: {e}")
            output = f"Error: {e}"
        if output:
            click.echo(output)
    click.echo("Session closed.")

if __name__ == "__main__":
    cli()
