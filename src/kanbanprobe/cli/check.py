"""Handler for 'kanbanprobe check'."""

import asyncio
from dataclasses import asdict

from kanbanprobe import scenarios
from kanbanprobe.cli._common import configure_logging, error, load_document_or_die, output_result
from kanbanprobe.document import BoardDocument
from kanbanprobe.errors import ProbeError
from kanbanprobe.ui.surface import open_surface

SCENARIOS = {
    "delete": scenarios.delete_card,
    "edit": scenarios.edit_card,
}


async def run_scenario(name: str, document: BoardDocument):
    """Run one scenario against a fresh headless board."""
    async with open_surface(document) as surface:
        return await SCENARIOS[name](surface)


def _describe(name: str, result) -> str:
    if name == "delete":
        return (
            f"ok: deleted {result.card!r} from {result.column!r} "
            f"({result.count_before} -> {result.count_after} cards)"
        )
    return (
        f"ok: {result.card!r} moved {result.original_column!r} -> {result.first_column!r}, "
        f"subtasks {result.completed_before} -> {result.completed_after} of {result.total}"
    )


def check(args) -> int:
    """Run a scenario and report whether every check held."""
    configure_logging(args.verbose)
    document = load_document_or_die(args.board, args.json)

    try:
        result = asyncio.run(run_scenario(args.scenario, document))
    except ProbeError as e:
        error(f"{args.scenario}: {e}", args.json)

    output_result({"scenario": args.scenario, "ok": True, **asdict(result)}, _describe(args.scenario, result), args.json)
    return 0
