"""
PktProbe command line interface
"""

from .commands import lookup_command, selftest_command, show_command

__all__ = ["show_command", "lookup_command", "selftest_command"]
