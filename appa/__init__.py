"""
appa - a small command-line greeting tool.

This package prints a hello message, personalized by an optional name
argument, along with a usage hint when no name is given.
"""

__version__ = "0.1.0"
__author__ = "appa contributors"
