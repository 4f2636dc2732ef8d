"""
Unit tests for the vdesk shell
"""

import io
import unittest
import os
import sys

# Add vdesk to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.console import Console

from vdesk.config import DesktopConfig
from vdesk.session import DesktopSession
from vdesk.shell import VDeskShell


class TestShell(unittest.TestCase):
    """Test shell commands against a fresh session"""

    def setUp(self):
        self.session = DesktopSession(DesktopConfig(workspace_dirs=[], prompt='desk'))
        self.fs = self.session.filesystem
        self.out = io.StringIO()
        console = Console(file=self.out, width=100, color_system=None, force_terminal=False)
        self.shell = VDeskShell(self.session, console=console)

    def run_cmd(self, line):
        self.out.seek(0)
        self.out.truncate()
        stop = self.shell.onecmd(line)
        self.shell.postcmd(stop, line)
        return self.out.getvalue()

    def test_create_and_list(self):
        self.run_cmd('mkdir proj')
        self.run_cmd('touch proj/a.txt')
        output = self.run_cmd('ls proj')
        self.assertIn('a.txt', output)
        self.assertIn('proj/', self.run_cmd('ls'))

    def test_long_listing(self):
        self.run_cmd('mkdir docs')
        self.run_cmd('touch notes.txt')
        self.run_cmd('write notes.txt hello world')
        output = self.run_cmd('ls -l /')
        self.assertIn('docs/', output)
        self.assertIn('notes.txt', output)
        self.assertIn('11', output)

    def test_write_and_cat(self):
        self.run_cmd('touch a.txt')
        self.run_cmd('write a.txt "hello [bold]there[/bold]"')
        self.assertEqual(self.fs.cat('/a.txt'), 'hello [bold]there[/bold]')
        self.assertEqual(self.run_cmd('cat a.txt'), 'hello [bold]there[/bold]\n')

    def test_cd_and_pwd(self):
        self.run_cmd('mkdir /proj')
        self.run_cmd('mkdir /proj/src')
        self.run_cmd('cd /proj/src')
        self.assertEqual(self.run_cmd('pwd'), '/proj/src\n')
        self.assertEqual(self.shell.prompt, 'desk:/proj/src> ')
        self.run_cmd('cd ..')
        self.assertEqual(self.shell.cwd, '/proj')
        self.run_cmd('cd')
        self.assertEqual(self.shell.cwd, '/')
        self.assertEqual(self.shell.prompt, 'desk> ')

    def test_cd_errors(self):
        self.run_cmd('touch f')
        self.assertIn('Not a directory', self.run_cmd('cd f'))
        self.assertIn('No such file or directory', self.run_cmd('cd missing'))
        self.assertEqual(self.shell.cwd, '/')

    def test_errors_are_reported(self):
        self.run_cmd('mkdir x')
        self.assertIn('mkdir: x: File exists', self.run_cmd('mkdir x'))
        self.assertIn('cat: x: Is a directory', self.run_cmd('cat x'))
        self.assertIn('Cannot remove the root', self.run_cmd('rm /'))
        self.assertIn('into itself', self.run_cmd('mv x x/y'))

    def test_mv_rm(self):
        self.run_cmd('mkdir a')
        self.run_cmd('touch a/f.txt')
        self.run_cmd('mkdir b')
        self.run_cmd('mv a/f.txt b/g.txt')
        self.assertTrue(self.fs.exists('/b/g.txt'))
        self.run_cmd('rm b')
        self.assertFalse(self.fs.exists('/b'))
        self.assertIn('Usage', self.run_cmd('mv only-one'))

    def test_search(self):
        self.run_cmd('mkdir proj')
        self.run_cmd('touch proj/b.txt')
        self.run_cmd('write proj/b.txt hello')
        self.assertEqual(self.run_cmd('search ell proj'), '/proj/b.txt\n')
        self.assertEqual(self.run_cmd('search ell'), '/proj/b.txt\n')

    def test_tree(self):
        self.run_cmd('mkdir proj')
        self.run_cmd('mkdir proj/src')
        self.run_cmd('touch proj/src/main.py')
        output = self.run_cmd('tree /')
        for name in ('proj/', 'src/', 'main.py'):
            self.assertIn(name, output)

    def test_version(self):
        self.run_cmd('mkdir a')
        self.run_cmd('mkdir a')
        self.assertEqual(self.run_cmd('version'), '1\n')

    def test_unknown_command(self):
        self.assertIn('Command not found: frobnicate', self.run_cmd('frobnicate now'))

    def test_help_lists_commands(self):
        output = self.run_cmd('help')
        for name in ('ls', 'mkdir', 'search', 'version'):
            self.assertIn(name, output)
        self.assertIn('Usage: mv', self.run_cmd('help mv'))

    def test_bad_quoting(self):
        self.assertIn('write:', self.run_cmd('write "unclosed'))

    def test_quoted_names(self):
        self.run_cmd('mkdir "my docs"')
        self.run_cmd('touch "my docs/my file"')
        self.run_cmd('write "my docs/my file" hi')
        self.assertEqual(self.run_cmd('cat "my docs/my file"'), 'hi\n')
        self.run_cmd("cd 'my docs'")
        self.assertEqual(self.shell.cwd, '/my docs')
        self.run_cmd('rm "my file"')
        self.assertFalse(self.fs.exists('/my docs/my file'))
        self.assertIn('cat:', self.run_cmd('cat "unclosed'))

    def test_double_slash_paths(self):
        self.run_cmd('mkdir //a')
        self.assertTrue(self.fs.is_dir('/a'))
        self.run_cmd('cd //a')
        self.assertEqual(self.shell.cwd, '/a')
        self.assertEqual(self.shell.prompt, 'desk:/a> ')
        self.assertEqual(self.shell.resolve('//a//b/'), '/a/b')

    def test_cmdloop(self):
        stdin = io.StringIO('mkdir /loop\ntouch /loop/x\nexit\n')
        stdout = io.StringIO()
        console = Console(file=io.StringIO(), color_system=None)
        shell = VDeskShell(self.session, console=console, stdin=stdin, stdout=stdout)
        shell.cmdloop()
        self.assertTrue(self.fs.exists('/loop/x'))


if __name__ == '__main__':
    unittest.main()
