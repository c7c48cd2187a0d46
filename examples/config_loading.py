"""config_loading.py"""
import sys
from pathlib import Path

from argpars.config import loader

args = loader(Path(__file__).parent / "argpars.yaml")

if __name__ == "__main__":
    if args.no_arguments_passed():
        args.display_help_screen()
    elif args.passed("--print-stuff") and not args.wrong_arguments_passed():
        print("stuff")
    sys.exit(args.pars())
