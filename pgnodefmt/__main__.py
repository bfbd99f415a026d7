# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
import sys
import pathlib

from .printer import format_result

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Read a node dump from stdin (or the named file), print it reformatted,
    and report any syntax error on stderr. Returns the exit status.
    """
    if argv is None:
        argv = sys.argv[1:]
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.WARNING, format="%(name)s: %(levelname)s: %(message)s")
    if len(argv) > 1:
        print("Usage: python -m pgnodefmt [filename]", file=sys.stderr)
        print("Reads a node dump from the file, or stdin, and prints it indented.", file=sys.stderr)
        return 2
    if argv:
        source = pathlib.Path(argv[0]).read_text()
    else:
        source = sys.stdin.read()
    logger.debug("Read %d characters of input", len(source))
    output, error = format_result(source)
    print(output)
    if error is not None:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
