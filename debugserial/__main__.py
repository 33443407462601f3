"""Entry point: parse the uart option and run the debug bridge until it exits."""

import sys

from debugserial.config import parse_args
from debugserial.bridge import BridgeError, run_bridge


def main(argv=None):
    args = parse_args(argv)
    try:
        status = run_bridge(args.uart)
    except BridgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(127)
    sys.exit(status)


if __name__ == "__main__":
    main()
