"""
Filesystem commands for vdesk Shell
"""

import shlex
import types

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ...exceptions import FileSystemError
from ...filesystem import join_path


def _split(shell, name, arg):
    try:
        return shlex.split(arg)
    except ValueError as e:
        shell.echo(f"{name}: {e}")
        return None


def register_commands(shell):
    """Register filesystem commands with shell"""

    def do_pwd(self, arg):
        """Print working directory"""
        self.echo(self.cwd)

    def do_cd(self, arg):
        """Change directory
        Usage: cd [directory]"""
        args = _split(self, 'cd', arg)
        if args is None:
            return
        name = args[0] if args else '/'
        target = self.resolve(name)
        try:
            if self.fs.is_dir(target):
                self.cwd = target
            else:
                self.echo(f"cd: {name}: Not a directory")
        except FileSystemError as e:
            self.echo(f"cd: {name}: {e}")

    def do_ls(self, arg):
        """List directory contents
        Usage: ls [-l] [directory]"""
        args = _split(self, 'ls', arg)
        if args is None:
            return
        long_format = '-l' in args
        dirs = [a for a in args if not a.startswith('-')]
        target = self.resolve(dirs[0] if dirs else '')

        try:
            entries = self.fs.ls(target)
            if long_format:
                table = Table(show_header=True)
                table.add_column("Type")
                table.add_column("Size", justify="right")
                table.add_column("Name")
                for entry in entries:
                    if entry.is_directory:
                        table.add_row("d", "-", Text(entry.name + "/"))
                    else:
                        size = len(self.fs.cat(join_path(target, entry.name)))
                        table.add_row("-", str(size), Text(entry.name))
            else:
                names = [Text(e.name + "/" if e.is_directory else e.name) for e in entries]
                table = Table.grid(padding=(0, 2))
                # Split names into rows of four
                chunk_size = 4
                for _ in range(min(chunk_size, len(names))):
                    table.add_column()
                for i in range(0, len(names), chunk_size):
                    table.add_row(*names[i:i + chunk_size])
            if entries:
                self.console.print(table)
        except FileSystemError as e:
            self.echo(f"ls: {target}: {e}")

    def do_tree(self, arg):
        """Show a directory and everything below it
        Usage: tree [directory]"""
        args = _split(self, 'tree', arg)
        if args is None:
            return
        target = self.resolve(args[0] if args else '')

        def add_level(branch, path):
            for entry in self.fs.ls(path):
                if entry.is_directory:
                    child = branch.add(Text(entry.name + "/"))
                    add_level(child, join_path(path, entry.name))
                else:
                    branch.add(Text(entry.name))

        try:
            tree = Tree(Text(target))
            add_level(tree, target)
            self.console.print(tree)
        except FileSystemError as e:
            self.echo(f"tree: {target}: {e}")

    def do_cat(self, arg):
        """Display file contents
        Usage: cat <file>"""
        args = _split(self, 'cat', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: cat <file>")
            return

        path = self.resolve(args[0])
        try:
            self.echo(self.fs.cat(path))
        except FileSystemError as e:
            self.echo(f"cat: {args[0]}: {e}")

    def do_mkdir(self, arg):
        """Create directory
        Usage: mkdir <directory>"""
        args = _split(self, 'mkdir', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: mkdir <directory>")
            return

        path = self.resolve(args[0])
        try:
            self.fs.mkdir(path)
        except FileSystemError as e:
            self.echo(f"mkdir: {args[0]}: {e}")

    def do_touch(self, arg):
        """Create empty file
        Usage: touch <file>"""
        args = _split(self, 'touch', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: touch <file>")
            return

        path = self.resolve(args[0])
        try:
            self.fs.touch(path)
        except FileSystemError as e:
            self.echo(f"touch: {args[0]}: {e}")

    def do_write(self, arg):
        """Replace file contents
        Usage: write <file> <text>"""
        args = _split(self, 'write', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: write <file> <text>")
            return

        path = self.resolve(args[0])
        try:
            self.fs.update_file(path, ' '.join(args[1:]))
        except FileSystemError as e:
            self.echo(f"write: {args[0]}: {e}")

    def do_rm(self, arg):
        """Remove file or directory (directories are removed recursively)
        Usage: rm <path>"""
        args = _split(self, 'rm', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: rm <path>")
            return

        path = self.resolve(args[0])
        try:
            self.fs.rm(path)
        except FileSystemError as e:
            self.echo(f"rm: {args[0]}: {e}")

    def do_mv(self, arg):
        """Move or rename file or directory
        Usage: mv <source> <destination>"""
        args = _split(self, 'mv', arg)
        if args is None:
            return
        if len(args) != 2:
            self.echo("Usage: mv <source> <destination>")
            return

        src, dst = self.resolve(args[0]), self.resolve(args[1])
        try:
            self.fs.mv(src, dst)
        except FileSystemError as e:
            self.echo(f"mv: {e}")

    def do_search(self, arg):
        """Find files and directories by name or content
        Usage: search <query> [directory]"""
        args = _split(self, 'search', arg)
        if args is None:
            return
        if not args:
            self.echo("Usage: search <query> [directory]")
            return

        target = self.resolve(args[1] if len(args) > 1 else '')
        try:
            for path in self.fs.search(target, args[0]):
                self.echo(path)
        except FileSystemError as e:
            self.echo(f"search: {target}: {e}")

    # Register all commands using MethodType
    shell.do_pwd = types.MethodType(do_pwd, shell)
    shell.do_cd = types.MethodType(do_cd, shell)
    shell.do_ls = types.MethodType(do_ls, shell)
    shell.do_tree = types.MethodType(do_tree, shell)
    shell.do_cat = types.MethodType(do_cat, shell)
    shell.do_mkdir = types.MethodType(do_mkdir, shell)
    shell.do_touch = types.MethodType(do_touch, shell)
    shell.do_write = types.MethodType(do_write, shell)
    shell.do_rm = types.MethodType(do_rm, shell)
    shell.do_mv = types.MethodType(do_mv, shell)
    shell.do_search = types.MethodType(do_search, shell)
