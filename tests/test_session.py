"""
Unit tests for desktop session ownership
"""

import unittest
import os
import sys
from unittest.mock import patch

# Add vdesk to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from vdesk.config import DesktopConfig
from vdesk.session import DesktopSession, get_session, reset_session
from vdesk.apps import CodeEditor, FileManager
from vdesk.exceptions import IsADirectory, NotADirectory
from vdesk.filesystem import makedirs


class TestDesktopSession(unittest.TestCase):
    """Test session bootstrap"""

    def test_default_workspace(self):
        session = DesktopSession()
        self.assertEqual([e.name for e in session.filesystem.ls('/')], ['vscode'])

    def test_nested_workspaces_and_seeds(self):
        config = DesktopConfig(
            workspace_dirs=['/home/user/projects', '/vscode'],
            seed_files={'/home/user/notes/todo.txt': 'buy milk'}
        )
        fs = DesktopSession(config).filesystem
        self.assertTrue(fs.is_dir('/home/user/projects'))
        self.assertTrue(fs.is_dir('/vscode'))
        self.assertEqual(fs.cat('/home/user/notes/todo.txt'), 'buy milk')
        self.assertEqual([e.name for e in fs.ls('/home/user')], ['projects', 'notes'])

    def test_seed_file_over_a_workspace_directory(self):
        config = DesktopConfig(workspace_dirs=['/a/b/c'], seed_files={'/a/b': 'x'})
        with self.assertRaises(IsADirectory):
            DesktopSession(config)

    def test_workspace_below_a_seeded_file(self):
        config = DesktopConfig(workspace_dirs=[], seed_files={'/a/b': 'x'})
        session = DesktopSession(config)
        self.assertEqual(session.filesystem.cat('/a/b'), 'x')
        with self.assertRaises(NotADirectory):
            makedirs(session.filesystem, '/a/b/c')

    def test_sessions_are_independent(self):
        first, second = DesktopSession(), DesktopSession()
        first.filesystem.mkdir('/only-here')
        self.assertFalse(second.filesystem.exists('/only-here'))

    def test_app_factories_share_the_tree(self):
        session = DesktopSession()
        editor = session.editor()
        manager = session.file_manager('/vscode')
        self.assertIsInstance(editor, CodeEditor)
        self.assertIsInstance(manager, FileManager)
        self.assertIs(editor.fs, session.filesystem)
        editor.new_file('main.py')
        self.assertEqual([e.name for e in manager.listing()], ['main.py'])


class TestProcessSession(unittest.TestCase):
    """Test the process-wide session accessor"""

    def setUp(self):
        reset_session()

    def tearDown(self):
        reset_session()

    def test_get_session_is_shared(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIs(get_session(), get_session())

    def test_reset_session(self):
        with patch.dict(os.environ, {}, clear=True):
            first = get_session()
            first.filesystem.mkdir('/scratch')
            reset_session()
            second = get_session()
        self.assertIsNot(first, second)
        self.assertFalse(second.filesystem.exists('/scratch'))


if __name__ == '__main__':
    unittest.main()
