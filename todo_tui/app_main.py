"""
app_main.py - Todo TUI main application
Todo TUI v1.0
"""

import argparse
import logging
import os
import sqlite3
import sys
from typing import TextIO

from rich.console import Console

from todo_tui.config import APP_TITLE, APP_VERSION, DB_PATH, LOG_PATH
from todo_tui.db import Store
from todo_tui.demo import seed_demo_data
from todo_tui.terminal.keys import KeyDecoder
from todo_tui.terminal.mode import terminal_mode
from todo_tui.ui import router
from todo_tui.ui_state import AppState

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


# ==========================================================================
# Drawing
# ==========================================================================


class Renderer:
    """Turn a markup frame into ANSI text and paint it over the previous one."""

    def __init__(self, out: TextIO, raw: bool = True, width: int | None = None):
        self.out = out
        self.raw = raw
        self.console = Console(file=out, force_terminal=True, width=width, highlight=False, emoji=False)

    def to_ansi(self, markup: str) -> str:
        with self.console.capture() as capture:
            self.console.print(markup)
        text = capture.get()
        if self.raw:
            # output post-processing is off in raw mode
            text = text.replace("\n", "\r\n")
        return text

    def draw(self, markup: str) -> None:
        self.out.write(CLEAR_SCREEN + self.to_ansi(markup))
        self.out.flush()


# ==========================================================================
# Main loop
# ==========================================================================


def process_key(state: AppState, key) -> None:
    """One keystroke: drop the previous notice, then let the active screen react."""
    state.clear_message()
    router.dispatch(state, key)


def loop(state: AppState, decoder: KeyDecoder, renderer: Renderer) -> None:
    while state.running:
        renderer.draw(router.render(state))
        process_key(state, decoder.next_key())


def run(store: Store, in_fd: int | None = None, out: TextIO | None = None) -> AppState:
    in_fd = sys.stdin.fileno() if in_fd is None else in_fd
    out = out or sys.stdout
    state = AppState(store)
    state.refresh_data()
    with terminal_mode(in_fd, out) as handle:
        decoder = KeyDecoder.for_fd(in_fd)
        renderer = Renderer(out, raw=handle is not None)
        loop(state, decoder, renderer)
    return state


# ==========================================================================
# Entry point
# ==========================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-tui", description=APP_TITLE)
    parser.add_argument("--db", default=DB_PATH, help=f"SQLite database file (default: {DB_PATH})")
    parser.add_argument("--demo", action="store_true", help="seed demo data into an empty database")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level (default: INFO)",
    )
    parser.add_argument("--log-file", default=LOG_PATH, help=f"log file (default: {LOG_PATH})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def configure_logging(level: str, log_file: str) -> None:
    # stdout belongs to the screen, so records go to a file
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, filename=log_file)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        store = Store.open(args.db)
    except (sqlite3.Error, OSError) as exc:
        logger.exception("Failed to open database at %s", args.db)
        print(f"Could not open database {args.db}: {exc}", file=sys.stderr)
        return 1

    try:
        if args.demo:
            seed_demo_data(store)
        run(store)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception:
        logger.exception("Unhandled exception running the TUI")
        print(f"Unexpected error; details in {args.log_file}", file=sys.stderr)
        return 1
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
