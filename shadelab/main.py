#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/main.py

import argparse
import sys

from shadelab import __version__
from shadelab.subcommands.command_registry import SUBCOMMANDS
from shadelab.shared.logger import log, ShadelabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser (help, version and command routing)."""
    parser = ShadelabArgumentParser(
        prog="shadelab",
        description="shadelab: tint and shade palettes, color conversion and contrast",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        epilog=f"commands: {', '.join(SUBCOMMANDS)}\n"
               "use 'shadelab COMMAND --help' for command options",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"shadelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main() -> None:
    """Main entry point for shadelab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
    else:
        log("error", "a command is required")
    log("info", "use 'shadelab --help' for more information")
    sys.exit(2)


if __name__ == "__main__":
    main()
