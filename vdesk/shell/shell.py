"""
vdesk Shell
Interactive file manager over the desktop session's filesystem
"""

import cmd
import logging
import posixpath
from typing import Optional

from rich.console import Console

from ..filesystem import normalize_path
from ..session import DesktopSession, get_session

logger = logging.getLogger('vdesk.shell')


class VDeskShell(cmd.Cmd):
    """Command loop bound to one desktop session"""

    intro = """
╔══════════════════════════════════════════════╗
║            vdesk - Virtual Desktop           ║
╚══════════════════════════════════════════════╝
Type 'help' for available commands
Type 'exit' to quit
"""

    def __init__(self, session: Optional[DesktopSession] = None,
                 console: Optional[Console] = None, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.session = session or get_session()
        self.fs = self.session.filesystem
        self.console = console or Console()

        # Current directory tracking
        self.cwd = '/'
        self.prompt = f'{self.session.config.prompt}> '

        self._load_commands()

    def _load_commands(self):
        """Load modular commands"""
        from .commands import filesystem
        filesystem.register_commands(self)

    def echo(self, text: str = ''):
        """Print plain text, without rich markup or highlighting"""
        self.console.print(text, markup=False, highlight=False)

    def resolve(self, path: str) -> str:
        """Absolute, normalized form of a path typed relative to cwd"""
        if not path:
            return self.cwd
        return normalize_path(posixpath.normpath(posixpath.join(self.cwd, path)))

    def postcmd(self, stop, line):
        """After each command"""
        # Update prompt with current directory
        name = self.session.config.prompt
        if self.cwd != '/':
            self.prompt = f'{name}:{self.cwd}> '
        else:
            self.prompt = f'{name}> '
        return stop

    def emptyline(self):
        """Do nothing on empty line"""
        pass

    def default(self, line):
        """Handle unknown commands"""
        self.echo(f"Command not found: {line.split()[0]}")
        self.echo("Type 'help' for available commands")

    # Built-in Commands

    def do_help(self, arg):
        """Show help for commands"""
        if arg:
            func = getattr(self, f'do_{arg}', None)
            if func is None:
                self.echo(f"No such command: {arg}")
            else:
                self.echo(func.__doc__ or f"No help available for '{arg}'")
            return

        commands = [name[3:] for name in dir(self) if name.startswith('do_')]
        groups = [
            ("File System", ['ls', 'tree', 'cd', 'pwd', 'cat', 'mkdir', 'touch',
                             'write', 'rm', 'mv', 'search']),
            ("Session", ['version', 'exit']),
        ]

        self.echo("\nAvailable Commands:")
        self.echo("=" * 40)
        for title, names in groups:
            self.echo(f"\n{title}:")
            for name in names:
                if name in commands:
                    self.echo(f"  {name:<10} - {self._get_short_help(name)}")
        self.echo("\nType 'help <command>' for detailed help")

    def _get_short_help(self, name):
        """Get short help for command"""
        doc = getattr(self, f'do_{name}').__doc__ or ""
        # Return first line only
        return doc.split('\n')[0].strip()

    def do_version(self, arg):
        """Show the filesystem change counter"""
        self.echo(str(self.fs.version))

    def do_exit(self, arg):
        """Exit vdesk shell"""
        self.echo("Goodbye!")
        return True

    def do_quit(self, arg):
        """Exit vdesk shell"""
        return self.do_exit(arg)

    def do_EOF(self, arg):
        """Handle Ctrl+D"""
        self.echo()
        return self.do_exit(arg)
