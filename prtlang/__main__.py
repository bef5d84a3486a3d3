# -*- coding: utf-8 -*-
"""
실행: prtlang program.prt
      python -m prtlang program.prt
"""

import argparse
import sys

from .interpreter import Interpreter, read_source


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='prtlang',
        description='Run a prt script (prt / input / assignment / if-else).',
    )
    parser.add_argument('source_file', help='script file to run')
    args = parser.parse_args(argv)

    try:
        lines = read_source(args.source_file)
    except (OSError, UnicodeDecodeError):
        print(f"Error: Could not open file {args.source_file}", file=sys.stderr)
        return 1

    Interpreter().run_lines(lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
