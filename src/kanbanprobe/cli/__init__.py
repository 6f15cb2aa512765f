"""CLI argument parser and dispatch for kanbanprobe."""

import argparse

from kanbanprobe.cli.check import SCENARIOS, check
from kanbanprobe.cli.snapshot import snapshot


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log each step to stderr")

    parser = argparse.ArgumentParser(
        prog="kanbanprobe",
        description="Snapshot and verify kanban boards. Pass a board file alone to open it interactively.",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- snapshot ---
    snapshot_p = nouns.add_parser("snapshot", help="Render a board and print its snapshot", parents=[common])
    snapshot_p.add_argument("board", help="Path to a markdown board document")
    snapshot_p.add_argument("--split", action="store_true", help="Split cards by subtask completion")
    snapshot_p.set_defaults(func=snapshot)

    # --- check ---
    check_p = nouns.add_parser("check", help="Run a scenario against a board", parents=[common])
    check_p.add_argument("scenario", choices=sorted(SCENARIOS), help="Scenario to run")
    check_p.add_argument("board", help="Path to a markdown board document")
    check_p.set_defaults(func=check)

    return parser
