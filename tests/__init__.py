"""
vdesk Test Suite
Unit tests for the virtual desktop filesystem and its consumers.

Use ``run_all_tests()`` for plain discovery, or ``tests/run_tests.py`` for a
per-module report.
"""

import os
import sys
import unittest

# Add vdesk to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


def run_all_tests(verbosity=2):
    """Discover and run every test_*.py module in this directory"""
    suite = unittest.TestLoader().discover(os.path.dirname(__file__), pattern='test_*.py')
    return unittest.TextTestRunner(verbosity=verbosity).run(suite)


if __name__ == '__main__':
    run_all_tests()
