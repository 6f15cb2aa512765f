"""Entry point for kanbanprobe CLI."""

import sys

NOUNS = {"snapshot", "check"}


def main():
    # A bare board path runs the board interactively
    if len(sys.argv) >= 2 and sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-"):
        from kanbanprobe.cli.show import show_board

        sys.exit(show_board(sys.argv[1]))

    from kanbanprobe.cli import build_parser

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
