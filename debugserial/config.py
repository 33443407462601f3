"""Configuration and command-line argument parsing for the serial debug bridge."""

import argparse
import sys


BAUD = 115200
LINK_NAME = "debug-serial"
SOCAT = "socat"


class _UsageParser(argparse.ArgumentParser):
    """Parser that answers any bad input with usage and a clean exit."""

    def error(self, message):
        self.print_help(sys.stdout)
        self.exit(0)


def build_parser():
    """Build the parser for the single --uart option."""
    parser = _UsageParser(
        prog="debug-serial",
        description=(
            f"Link a pseudo-terminal at <project>/{LINK_NAME} to a serial UART "
            f"({BAUD} baud) through socat, tracing both directions."
        ),
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-u",
        "--uart",
        help="Serial uart device to use",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show this message and exit",
    )
    return parser


def _attached_value(argv):
    """True if a uart value is glued to its flag, as in -u/dev/ttyX or --uart=/dev/ttyX."""
    expect_value = False
    for token in argv:
        if expect_value:
            expect_value = False
        elif token in ("-u", "--uart"):
            expect_value = True
        elif token.startswith("--uart=") or (token.startswith("-u") and not token.startswith("--")):
            return True
    return False


def parse_args(argv=None):
    """Parse command-line arguments; print usage and exit 0 unless a uart was given."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help or not args.uart or _attached_value(argv):
        parser.print_help(sys.stdout)
        parser.exit(0)
    return args
