"""Handler for 'kanbanprobe snapshot'."""

from kanbanprobe.cli._common import configure_logging, format_board, load_document_or_die, output_json, read_board
from kanbanprobe.partition import split_by_completion


def snapshot(args) -> int:
    """Render a board document and print what a snapshot reads back."""
    configure_logging(args.verbose)
    document = load_document_or_die(args.board, args.json)
    board = read_board(document)

    if args.split:
        split = split_by_completion(board)
        parts = {
            "completed": split.completed,
            "incomplete": split.incomplete,
            "unparsable": split.unparsable,
        }
        if args.json:
            output_json({"title": document.title, **{k: v.to_dict() for k, v in parts.items()}})
        else:
            print(document.title)
            for label, part in parts.items():
                print(f"{label}:")
                for line in format_board(part, indent="  "):
                    print(line)
        return 0

    if args.json:
        output_json({"title": document.title, "columns": board.to_dict()})
    else:
        print(document.title)
        for line in format_board(board):
            print(line)

    return 0
