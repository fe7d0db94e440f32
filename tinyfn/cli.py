"""
Command-line driver.

    tinyfn decl.txt                     # validate a declaration
    tinyfn call.txt --emit eval         # evaluate a call
    echo "add(x, y)" | tinyfn - --emit tac
    tinyfn --symbols                    # print the symbol table
"""
import argparse
import logging
import sys

from .frontend import Operation, format_symbol_table, run

log = logging.getLogger(__name__)


def build_parser():
    ap = argparse.ArgumentParser(prog='tinyfn', description="Tiny-Fn front-end")
    ap.add_argument('file', nargs='?', help="source file, or '-' for stdin")
    ap.add_argument('--emit', choices=[op.value for op in Operation],
                    default=Operation.VALIDATE.value,
                    help="operation to run on the source (default: validate)")
    ap.add_argument('--symbols', action='store_true', help="print the symbol table")
    ap.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    return ap


def read_source(path):
    if path == '-':
        return sys.stdin.read()
    with open(path) as f:
        return f.read()


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.symbols:
        sys.stdout.write(format_symbol_table())
        if not args.file:
            return 0
    elif not args.file:
        ap.error("a source file is required unless --symbols is given")

    try:
        code = read_source(args.file)
    except OSError as e:
        print(f"[FATAL] cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 1

    out = run(Operation(args.emit), code)
    print(out.rstrip('\n'))
    if out.startswith("Error: "):
        log.debug("operation %s reported an error", args.emit)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
