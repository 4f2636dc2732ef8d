#!/usr/bin/env python3

"""
vdesk - Main Entry Point
"""

import argparse
import logging
import sys
from typing import Optional

from .config import load_config
from .exceptions import ConfigError, FileSystemError
from .session import DesktopSession
from .shell import VDeskShell

logger = logging.getLogger('vdesk')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """Configure root logging for the desktop"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='vdesk', description='Virtual desktop file system shell')
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--log-level', help='Override the configured log level')
    parser.add_argument('--log-file', help='Also write logs to this file')
    parser.add_argument('-c', '--command', help='Run one shell command and exit')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Start the virtual desktop shell"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"vdesk: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or config.log_level, args.log_file or config.log_file)

    logger.info("Initializing vdesk session...")
    try:
        session = DesktopSession(config)
    except FileSystemError as e:
        print(f"vdesk: {e}", file=sys.stderr)
        return 2
    shell = VDeskShell(session)

    if args.command:
        shell.onecmd(args.command)
        return 0

    logger.info("Shell initialized, starting command loop...")
    shell.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
