import sys

import click
from pathlib import Path
from colorama import init, Fore, Style

from .config import Config
from .defaults import DISCOVERY_STRATEGIES
from .errors import AiAddError
from .mode import disable_mode, enable_mode, is_mode_enabled, setup_workspace
from .reporter import ConsoleReporter
from .staging import stage_files
from .workspaces import find_workspaces

init()


class DefaultCommandGroup(click.Group):
    """Group that falls back to a default command for unknown first arguments"""

    def __init__(self, *args, default_command='add', **kwargs):
        kwargs.setdefault('invoke_without_command', True)
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(self, ctx, args):
        if args and self.get_command(ctx, args[0]) is None:
            args = [self.default_command, *args]
        return super().resolve_command(ctx, args)


@click.group(cls=DefaultCommandGroup)
@click.option('--verbose', '-v', is_flag=True, help='Show what is happening in each workspace')
@click.option('--discovery', type=click.Choice(DISCOVERY_STRATEGIES), default=None,
              help='Workspace discovery strategy (overrides aiadd.yml)')
@click.version_option(package_name='git-aiadd')
@click.pass_context
def main(ctx, verbose, discovery):
    """git-aiadd - git add wrapper for AI development"""
    ctx.obj = {
        'reporter': ConsoleReporter(verbose),
        'config': Config(Path.cwd(), discovery),
    }
    if ctx.invoked_subcommand is None:
        ctx.invoke(add, paths=())


@main.command()
@click.pass_context
def on(ctx):
    """Enter AI development mode"""
    reporter, config = _context(ctx)
    workspaces = _discover(reporter, config)

    for workspace in workspaces:
        reporter.debug(f"Processing workspace: {workspace.path}")
        try:
            enable_mode(workspace.path, reporter, seed_defaults=config.seed_defaults)
        except (OSError, AiAddError) as e:
            _fail(e)

    reporter.success("AI development mode enabled")


@main.command()
@click.pass_context
def off(ctx):
    """Exit AI development mode"""
    reporter, config = _context(ctx)
    workspaces = _discover(reporter, config)

    for workspace in workspaces:
        if not is_mode_enabled(workspace.path):
            continue
        reporter.debug(f"Processing workspace: {workspace.path}")
        try:
            disable_mode(workspace.path, reporter)
        except (OSError, AiAddError) as e:
            _fail(e)

    reporter.success("AI development mode disabled")


@main.command()
def status():
    """Check AI development mode status"""
    enabled = is_mode_enabled(Path.cwd())
    color = Fore.GREEN if enabled else Fore.YELLOW
    click.echo(f"{color}AI mode {'enabled' if enabled else 'disabled'}{Style.RESET_ALL}")


@main.command(name='init')
@click.pass_context
def init_command(ctx):
    """Create default .gitignore and ai.gitignore files"""
    reporter, config = _context(ctx)
    targets = [workspace.path for workspace in _discover(reporter, config, warn_empty=False)] or [Path.cwd()]

    written = []
    for target in targets:
        try:
            written.extend(setup_workspace(target, reporter))
        except (OSError, AiAddError) as e:
            _fail(e)

    if not written:
        click.echo(f"{Fore.YELLOW}Ignore files already set up{Style.RESET_ALL}")
    for path in written:
        click.echo(f"  {Fore.GREEN}Created/updated: {path}{Style.RESET_ALL}")


@main.command()
@click.argument('paths', nargs=-1)
@click.pass_context
def add(ctx, paths):
    """Add files, leaving out AI files while AI mode is on"""
    reporter, config = _context(ctx)
    try:
        staged = stage_files(list(paths), Path.cwd(), config=config, reporter=reporter)
    except AiAddError as e:
        _fail(e)
    reporter.debug(f"Added: {staged}")


def _context(ctx):
    return ctx.obj['reporter'], ctx.obj['config']


def _discover(reporter, config, warn_empty=True):
    try:
        workspaces = find_workspaces(Path.cwd(), config.discovery, reporter)
    except AiAddError as e:
        _fail(e)
    if not workspaces and warn_empty:
        reporter.warn(f"No workspaces found in {Path.cwd()}")
    return workspaces


def _fail(error):
    click.echo(f"{Fore.RED}Error: {error}{Style.RESET_ALL}", err=True)
    sys.exit(1)


if __name__ == '__main__':
    main()
