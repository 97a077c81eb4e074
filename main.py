#!/usr/bin/env python3
"""
Command-line front end for the calculator engine.

    python main.py "2+3*4" "sin(90)" --deg
    echo "(2+3)*4" | python main.py

Each expression prints one line: the display result, or "Error".
Without expression arguments, expressions are read one per line from stdin.
"""
import argparse
import logging
import sys
from typing import Iterable, List, Optional

from calcengine import AngleMode, CalculatorEngine


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate calculator expressions")
    parser.add_argument("expressions", nargs="*", help="expressions to evaluate (default: read stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--deg", dest="mode", action="store_const", const=AngleMode.DEGREES,
                      help="read trig arguments as degrees")
    mode.add_argument("--rad", dest="mode", action="store_const", const=AngleMode.RADIANS,
                      help="read trig arguments as radians (default)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log tokens, postfix and values")
    parser.set_defaults(mode=AngleMode.RADIANS)
    return parser


def _run(engine: CalculatorEngine, lines: Iterable[str]) -> int:
    failed = False
    for line in lines:
        result = engine.calculate(line)
        if result == "Error":
            failed = True
        print(result)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = CalculatorEngine(args.mode)
    if args.expressions:
        return _run(engine, args.expressions)
    return _run(engine, (line.rstrip("\n") for line in sys.stdin))


if __name__ == "__main__":
    sys.exit(main())
