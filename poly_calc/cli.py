#!/usr/bin/env python3
"""Run the polynomial calculator on stdin or a file.

Usage:
    # Interactive / piped input
    poly-calc < commands.txt

    # Read from a file, dumping the stack in structural form
    poly-calc commands.txt --dump_format card
"""

import argparse
import sys

from poly_calc.config import Config, DUMP_FORMATS
from poly_calc.calc.interpreter import Interpreter


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="poly-calc",
        description="Stack calculator for sparse multivariate polynomials",
    )
    parser.add_argument("file", nargs="?", default=None,
                        help="Input file (default: stdin)")
    parser.add_argument("--max_command_length", type=int, default=Config.max_command_length,
                        help="Longest accepted command token")
    parser.add_argument("--dump_format", choices=DUMP_FORMATS, default=Config.dump_format,
                        help="Polynomial format used by DUMP")
    parser.add_argument("--verbose", action="store_true",
                        help="Print the effective configuration to stderr")

    args = parser.parse_args(argv)

    config = Config(
        max_command_length=args.max_command_length,
        dump_format=args.dump_format,
    )

    if args.verbose:
        print(f"Config: coeff=[{config.coeff_min}, {config.coeff_max}], "
              f"exp=[{config.exp_min}, {config.exp_max}]", file=sys.stderr)
        print(f"  max_command_length={config.max_command_length}, "
              f"dump_format={config.dump_format}", file=sys.stderr)

    if args.file is None:
        return Interpreter(config).run()
    with open(args.file, "rt", errors="surrogateescape") as f:
        return Interpreter(config, stdin=f).run()


if __name__ == "__main__":
    sys.exit(main())
