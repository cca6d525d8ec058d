"""Inventory keeping with role-based user accounts in plain text files, with a command-line front end."""

__version__ = "0.1.0"