#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared command-line plumbing: argument parser, rich UI, logging, exit codes"""

import sys
import logging
import argparse
from typing import Callable, List, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich.markup import escape
from rich import box

from shift_cipher import CipherError, UsageError

logger = logging.getLogger(__name__)

_log_handler: Optional[RichHandler] = None


# ═══════════════════════════════════════════════════════════════════════════════
# ARGUMENTS
# ═══════════════════════════════════════════════════════════════════════════════

class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError (exit 1) instead of exiting with 2"""

    def fail(self, message: str):
        raise UsageError(f"{self.format_usage()}{self.prog}: error: {message}")

    def error(self, message: str):
        self.fail(message)


def setup_logging(verbose: bool = False):
    global _log_handler
    root = logging.getLogger()
    if _log_handler is None:
        _log_handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False
        )
        _log_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_log_handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ═══════════════════════════════════════════════════════════════════════════════
# UI
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self):
        self.c = Console()
        self.err = Console(stderr=True)

    def result(self, text: str):
        # plain print: byte-exact and pipe friendly
        print(text)

    def error(self, message: str):
        self.err.print(message, markup=False, highlight=False, soft_wrap=True)

    def all_keys_table(self, results: List[Tuple[int, str]], title: str):
        tbl = Table(
            box=box.SIMPLE, show_header=True,
            header_style="bold", title=f"[bold]{escape(title)}[/bold]"
        )
        tbl.add_column("Key", style="yellow", no_wrap=True)
        tbl.add_column("Output")
        for k, text in results:
            tbl.add_row(f"ROT{k}", Text(text))
        self.c.print(tbl)


# ═══════════════════════════════════════════════════════════════════════════════
# ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

def guard(run: Callable[[Optional[List[str]], UI], int], argv: Optional[List[str]] = None) -> int:
    """Runs a CLI body and turns every fatal error into a message and an exit code"""
    ui = UI()
    try:
        return run(argv, ui)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except CipherError as e:
        logger.debug("fatal: %s", type(e).__name__)
        ui.error(str(e).rstrip('\n'))
        return e.exit_code
    except MemoryError:
        ui.error("Memory allocation failed.")
        return 1
