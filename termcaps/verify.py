"""
Verify a capability file and summarize which terminals use which ``$TERM``.

Run ``verify-caps <FILE>`` or ``python -m termcaps.verify <FILE>``. Without
a file, the command checks the configured capability data.
"""
import argparse
import logging
import sys

from .capinfo import load, LoadError
from .catalog import Catalog
from .environment import load_configured_catalog


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verify-caps",
        description="""
            Check that a YAML file with terminal capabilities is valid and list
            the terminals grouped by the value of $TERM they set. Without a
            file, check the file named by $TERMCAPS_DATA or, if undefined, the
            bundled capability data.
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="log progress; use twice for debug output",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="the capability file",
    )
    return parser


def summarize(catalog: Catalog) -> str:
    lines: list[str] = []
    for term, group in catalog.groups():
        lines.append(f"{term}:")
        for identity in group.members():
            lines.append(f' - {identity.compact} ("{identity.pretty}")')
    return "\n".join(lines)


def main(argv: None | list[str] = None) -> int:
    options = create_parser().parse_args(argv)
    logging.basicConfig(
        level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(options.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load(options.file) if options.file else load_configured_catalog()
    except LoadError as x:
        print(f"verify-caps: {x}", file=sys.stderr)
        return 1

    print(summarize(catalog))
    return 0


if __name__ == "__main__":
    sys.exit(main())
