"""
vdesk Shell
"""
from .shell import VDeskShell

__all__ = ['VDeskShell']
