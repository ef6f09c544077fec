"""
minishell: a small Unix-like shell with its own command applications.
"""

__version__ = "0.1.0"
