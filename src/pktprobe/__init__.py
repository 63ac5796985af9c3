"""
PktProbe - UDP probe payload templates
"""

__version__ = "0.1.0"
