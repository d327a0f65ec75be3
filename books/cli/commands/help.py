# books/cli/commands/help.py
import click
from click.shell_completion import get_completion_class

PROG_NAME = 'books'
COMPLETE_VAR = '_BOOKS_COMPLETE'

@click.command(name='help')
@click.argument('command', required=False)
@click.pass_context
def help_command(ctx, command):
    """Show help for the tool or for COMMAND"""
    parent = ctx.parent
    if command is None:
        click.echo(parent.get_help())
        return

    cmd = parent.command.get_command(parent, command)
    if cmd is None:
        raise click.UsageError(f"No such command '{command}'.", ctx=parent)
    click.echo(cmd.get_help(click.Context(cmd, info_name=command, parent=parent)))

@click.command()
@click.argument('shell', type=click.Choice(['bash', 'zsh', 'fish']))
@click.pass_context
def completion(ctx, shell):
    """Print the shell completion script

    Example:
        eval "$(books completion bash)"
    """
    comp_cls = get_completion_class(shell)
    comp = comp_cls(ctx.find_root().command, {}, PROG_NAME, COMPLETE_VAR)
    click.echo(comp.source())
