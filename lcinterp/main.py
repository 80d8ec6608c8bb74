"""Uses the lc language implementation to interpret .lc files, or run in command-line mode. Called from the lc
executable script.
"""

import argparse
import sys

from lcinterp.lang.error import Verbosity
from lcinterp.lang.interpreter import Interpreter, InterpreterOptions
from lcinterp.lang.shell import Shell
from lcinterp.pure.reducer import Reducer


def create_arg_parser():
    parser = argparse.ArgumentParser(prog="lc", description="Untyped lambda calculus interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="show input terms (-v) and every reduction step (-vv)")
    parser.add_argument("--max-reductions", type=int, default=Reducer.MAX_REDUCTIONS, metavar="N",
                        help="give up on a term after N beta reductions (default: %(default)s)")
    parser.add_argument("--no-color", action="store_true", help="disable colored error messages")
    return parser


def main(argv=None):
    """Runs lc interpreter. Returns exit status: 1 if running a file reported any error, else 0."""
    args = create_arg_parser().parse_args(argv)

    options = InterpreterOptions(
        verbosity=Verbosity(min(args.verbose, Verbosity.HIGH)),
        max_reductions=args.max_reductions,
        color=not args.no_color,
    )
    interpreter = Interpreter(options)

    if args.file is None:
        Shell(interpreter).cmdloop()
        return 0

    try:
        with open(args.file, encoding="utf-8") as file:
            source = file.read()
    except OSError:
        interpreter.logger.report_error(None, f"'{args.file}' could not be opened")
        return 1

    with interpreter.logger:  # deeply nested input can exhaust the recursion limit outside of reduction
        interpreter.interpret(source)
    return 1 if interpreter.logger.had_error else 0


if __name__ == "__main__":
    sys.exit(main())
