"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/notedoc/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the ``--rich`` flag is set and either
    ``--force-rich`` is set or the target stream is a TTY.
    """
    if not getattr(args, "rich", False):
        return False
    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def write_output(
    content: str,
    args: argparse.Namespace,
    is_json: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """Write a command result to ``--out`` or the terminal.

    Parameters
    ----------
    content : str
        Text to write
    args : argparse.Namespace
        Parsed command line arguments (``out``, ``rich``, ``force_rich``)
    is_json : bool, default True
        Whether ``content`` is JSON and may be pretty printed with Rich
    stream : TextIO, optional
        Terminal stream, defaults to sys.stdout

    """
    out_path = getattr(args, "out", None)
    if out_path:
        Path(out_path).write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
        return

    target = stream or sys.stdout
    if is_json and should_use_rich_output(args, target):
        Console(file=target, force_terminal=getattr(args, "force_rich", False) or None).print_json(content)
        return

    target.write(content)
    if not content.endswith("\n"):
        target.write("\n")


def write_status(message: str, stream: Optional[TextIO] = None) -> None:
    """Write a status message (e.g. an edit result) to stderr."""
    target = stream or sys.stderr
    target.write(message + "\n")
