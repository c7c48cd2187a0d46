"""usage.py"""
import sys

from argpars import ArgsParser, HelpInfo
from argpars.utils import get_program_invocation, setup_logging


def print_stuff():
    print("stuff")


def main() -> int:
    setup_logging(mode="cli")
    program = get_program_invocation()

    # To disable --help and --version pass default_arguments=False
    args = ArgsParser(
        help_info=HelpInfo(
            usage=f"Usage: {program} [OPTION]... [TEST]",
            name="Test App",
            description="This is a test description",
            version="v1.0",
        ),
    )

    args.add_help_section("TEST SECTION:", "  this is a test section!")
    args.add_help_section(
        "SECOND TEST SECTION:",
        "  this is another test section!\n  With multiple lines!",
    )

    args.add_argument("--print-stuff", 'display "stuff"')

    if args.no_arguments_passed():
        args.display_help_screen()
    # pars() handles default (help, version) and wrong arguments
    elif args.default_arguments_passed() or args.wrong_arguments_passed():
        pass
    elif args.passed("--print-stuff"):
        print_stuff()

    return args.pars()


if __name__ == "__main__":
    sys.exit(main())
