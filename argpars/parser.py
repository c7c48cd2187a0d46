# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgsParser`, a deliberately small alternative to argparse
for programs that only care about which flags were passed.

The parser captures the argument vector once, keeps an ordered registry of
flags and their descriptions, and answers boolean questions about the captured
tokens. It never raises on bad input: unknown tokens are classified and mapped
to an exit code by `pars()`.

Public Interface:
- `add_argument(name, description)`: Register a flag for recognition and help.
- `add_help_section(title, content)`: Append a free-text block to the help screen.
- `no_arguments_passed()`, `passed(name)`, `default_arguments_passed()`,
  `wrong_arguments_passed()`: Read-only classification queries.
- `display_help_screen()`, `display_version_screen()`: Plain text rendering.
- `pars()`: Report help/version/errors and return the process exit code.

Example Usage:
    args = ArgsParser(
        help_info=HelpInfo(
            usage=f"Usage: {sys.argv[0]} [OPTION]...",
            name="Test App",
            description="This is a test description",
            version="v1.0",
        )
    )
    args.add_argument("--print-stuff", 'display "stuff"')

    if args.no_arguments_passed():
        args.display_help_screen()
    elif args.default_arguments_passed() or args.wrong_arguments_passed():
        pass
    elif args.passed("--print-stuff"):
        print("stuff")

    sys.exit(args.pars())

Design Notes:
There are no values, types, positionals or subcommands. A token is recognized
only if it exactly matches a registered name or one of the reserved help and
version flags.
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console

from argpars.argument import ArgumentSpec, HelpSection
from argpars.console import console as argpars_console
from argpars.help_info import HelpInfo
from argpars.logger import logger

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

HELP_FLAGS: tuple[str, ...] = ("-h", "--help")
VERSION_FLAGS: tuple[str, ...] = ("-v", "--version")

_RESERVED_HELP: tuple[tuple[tuple[str, ...], str], ...] = (
    (HELP_FLAGS, "display this help and exit"),
    (VERSION_FLAGS, "output version information and exit"),
)


class ArgsParser:
    """
    Flag registry and classifier for a single program run.

    The argument vector is captured once, in `__init__`, and is never read
    again; every query answers against that snapshot. Help metadata comes
    from a `HelpInfo` value given at construction.

    Features:
    - Ordered flag registry used for recognition and help rendering.
    - Reserved `-h/--help` and `-v/--version` flags, optionally disabled.
    - Pure, idempotent classification queries.
    - Plain text help, version and error screens through a Rich console.
    - A two-state exit code from `pars()`.

    Not thread-safe. Finish every `add_argument()` / `add_help_section()` call
    before issuing queries, and never call them concurrently with anything else.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        help_info: HelpInfo | None = None,
        *,
        default_arguments: bool = True,
        console: Console | None = None,
    ) -> None:
        """Initialize the ArgsParser."""
        self._arguments_passed: tuple[str, ...] = tuple(
            sys.argv if argv is None else argv
        )
        self.help_info: HelpInfo = help_info or HelpInfo()
        self.default_arguments: bool = default_arguments
        self.console: Console = console or argpars_console
        self._registry: dict[str, ArgumentSpec] = {}
        self._help_sections: list[HelpSection] = []
        logger.debug(
            "Captured %d argument(s): %s",
            len(self._arguments_passed),
            self._arguments_passed,
        )

    @property
    def arguments_passed(self) -> tuple[str, ...]:
        """The captured argument vector, program name included."""
        return self._arguments_passed

    @property
    def program(self) -> str:
        return self._arguments_passed[0] if self._arguments_passed else ""

    @property
    def registry(self) -> dict[str, ArgumentSpec]:
        """A copy of the registry, in registration order."""
        return dict(self._registry)

    @property
    def help_sections(self) -> list[HelpSection]:
        return list(self._help_sections)

    @property
    def help_usage(self) -> str:
        return self.help_info.usage

    @property
    def help_name(self) -> str:
        return self.help_info.name

    @property
    def help_description(self) -> str:
        return self.help_info.description

    @property
    def help_version(self) -> str:
        return self.help_info.version

    @property
    def reserved_flags(self) -> tuple[str, ...]:
        """Flags recognized without registration, empty when disabled."""
        if not self.default_arguments:
            return ()
        return HELP_FLAGS + VERSION_FLAGS

    def add_argument(self, name: str, description: str = "") -> None:
        """
        Register a flag.

        Re-registering an existing name replaces its description and keeps
        its original position in the help screen.

        Args:
            name (str): The exact flag token, e.g. `--print-stuff`.
            description (str): Help text shown next to the flag.
        """
        spec = ArgumentSpec(name=name, description=description)
        if not spec.looks_like_flag:
            logger.warning(
                "Argument %r does not start with '-' or '--'; help output may look odd.",
                name,
            )
        if name in self._registry:
            logger.warning("Argument %r already registered; replacing description.", name)
        elif name in self.reserved_flags:
            logger.warning("Argument %r shadows a reserved default argument.", name)
        self._registry[name] = spec
        logger.debug("Registered argument %r", name)

    def add_help_section(self, title: str, content: str = "") -> None:
        """
        Add a section to the help screen, rendered after the option list.

        Args:
            title (str): Heading line, e.g. `EXAMPLES:`.
            content (str): Section body, printed as-is.
        """
        self._help_sections.append(HelpSection(title=title, content=content))

    def is_recognized(self, token: str) -> bool:
        """True if the token is a registered name or an enabled reserved flag."""
        return token in self._registry or token in self.reserved_flags

    def no_arguments_passed(self) -> bool:
        """True if nothing but the program name was passed."""
        return len(self._arguments_passed) <= 1

    def passed(self, name: str) -> bool:
        """True if `name` appears anywhere after the program name."""
        return name in self._arguments_passed[1:]

    def default_arguments_passed(self) -> bool:
        """True if a reserved help or version flag was passed."""
        return any(self.passed(flag) for flag in self.reserved_flags)

    def unknown_arguments(self) -> list[str]:
        """Return the unrecognized tokens, in the order they were passed."""
        return [
            token for token in self._arguments_passed[1:] if not self.is_recognized(token)
        ]

    def wrong_arguments_passed(self) -> bool:
        """True if at least one passed token is not recognized."""
        return any(
            not self.is_recognized(token) for token in self._arguments_passed[1:]
        )

    def _print(self, text: str = "") -> None:
        # Written straight to the console file so tabs survive.
        self.console.file.write(f"{text}\n")
        self.console.file.flush()

    def _print_heading(self, text: str) -> None:
        self.console.print(text, style="bold", markup=False, highlight=False)

    def get_option_lines(self) -> list[str]:
        """
        Render every recognized option as a help line.

        Reserved flags come first (when enabled), then the registry in
        registration order. Reserved flags that were registered explicitly are
        listed only with their registry description.
        """
        lines = []
        if self.default_arguments:
            for flags, description in _RESERVED_HELP:
                flags = tuple(flag for flag in flags if flag not in self._registry)
                if flags:
                    lines.append(
                        ArgumentSpec(", ".join(flags), description).get_help_line()
                    )
        for spec in self._registry.values():
            lines.append(spec.get_help_line())
        return lines

    def display_help_screen(self) -> None:
        """
        Print the help screen.

        Order: usage, name, description, option list, help sections, version.
        Missing fields render as empty lines.
        """
        self._print(self.help_usage)
        self._print()
        self._print(self.help_name)
        self._print(self.help_description)
        self._print()
        self._print_heading("Possible options:")
        for line in self.get_option_lines():
            self._print(line)

        for section in self._help_sections:
            self._print()
            self._print(section.title)
            self._print(section.content)

        self._print()
        self._print(self.help_version)

    def display_version_screen(self) -> None:
        """Print `<name> version: <version>`."""
        self._print(f"{self.help_name} version: {self.help_version}")

    def display_error_message(self, token: str) -> None:
        """Report an unrecognized token."""
        self._print(f"ERROR: No such option: '{token}'")
        if "--help" in self.reserved_flags:
            self._print(f"Try: '{self.program} --help' for more information.")

    def pars(self) -> int:
        """
        Finish a run and return the process exit code.

        Reports the first unrecognized token and returns `EXIT_FAILURE`, or
        renders the help/version screens when their reserved flags were
        passed and returns `EXIT_SUCCESS`.
        """
        if self.no_arguments_passed():
            logger.debug("No arguments passed.")
            return EXIT_SUCCESS

        unknown = self.unknown_arguments()
        if unknown:
            logger.debug("Unrecognized argument(s): %s", unknown)
            self.display_error_message(unknown[0])
            return EXIT_FAILURE

        if self.default_arguments:
            if any(self.passed(flag) for flag in HELP_FLAGS):
                self.display_help_screen()
            if any(self.passed(flag) for flag in VERSION_FLAGS):
                self.display_version_screen()
        return EXIT_SUCCESS

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        return (
            f"ArgsParser(args={len(self._registry)}, "
            f"passed={len(self._arguments_passed[1:])}, "
            f"default_arguments={self.default_arguments})"
        )

    def __repr__(self) -> str:
        return str(self)
