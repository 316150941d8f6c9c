"""
cs CLI Module

Contains the command-line interface:
- main: CLI entry point with typer
- output: Rich terminal output
"""

from .main import app, main

__all__ = [
    "app",
    "main",
]
