"""Command-line entry point: dispatches flags to their actions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from catman import actions, helptext


@dataclass(frozen=True)
class Command:
    """A command-line flag set and the action it triggers."""

    flags: tuple[str, ...]
    needs_arg: bool
    action: Callable[[str], None]


COMMANDS: tuple[Command, ...] = (
    Command(("-h", "--help", "--herp"), False, lambda _: helptext.print_help()),
    Command(("-i", "--install"), True, actions.install_module),
    Command(("-s", "--search"), True, actions.search),
    Command(("-l", "--list"), False, lambda _: actions.list_packages()),
    Command(("-d", "--delete"), True, actions.delete_module),
)


def find_command(flag: str) -> Command | None:
    """Return the command whose flags include ``flag``, ignoring case."""
    wanted = flag.casefold()
    return next(
        (cmd for cmd in COMMANDS if any(f.casefold() == wanted for f in cmd.flags)),
        None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by the arguments and return the exit status."""
    if not helptext.is_root():
        print("catman can only be run as root, sorry")
        return 1

    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        helptext.print_help()
        return 0

    command = find_command(args[0])
    if command is None:
        print("Unknown command:", args[0])
        helptext.print_help()
        return 0

    if command.needs_arg:
        if len(args) < 2:
            print("Error: missing package name")
            return 1
        command.action(args[1])
    else:
        command.action("")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())