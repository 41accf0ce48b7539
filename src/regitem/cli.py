"""
Command line for canonicalizing, hashing, and checking register items.

Usage:
    regitem item canon '{"foo": "abc", "bar": "xyz"}'
    regitem item hash '{"bar":"xyz","foo":"abc"}' [--force]
    regitem value check 'POINT (0 0)' --type point

Every command prints its result on stdout. On failure the error goes to
stderr and the exit status is 1.
"""

from __future__ import annotations

import argparse
import logging
import sys

from regitem.config import Settings
from regitem.core.codec import from_json, to_json
from regitem.core.errors import InvalidValueError
from regitem.core.hashing import canonical_hash
from regitem.core.kind import PRIMITIVES, KindLike, ListKind, kind_from_value
from regitem.core.value import parse

logger = logging.getLogger(__name__)

ITEM_EXAMPLES = """
examples:

    $ regitem item canon '{"foo": "abc", "bar": "xyz"}'
    {"bar":"xyz","foo":"abc"}

    $ regitem item hash '{"bar":"xyz","foo":"abc"}'
    5dd4fe3b0de91882dae86b223ca531b5c8f2335d9ee3fd0ab18dfdc2871d0c61
"""


def _fail(err: BaseException) -> int:
    print(err, file=sys.stderr)
    return 1


def _cmd_item(argv: list[str], settings: Settings) -> int:
    p = argparse.ArgumentParser(
        prog="regitem item",
        description="Manage items.",
        epilog=ITEM_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = p.add_subparsers(dest="action", required=True)

    canon = sub.add_parser("canon", aliases=["fix"], help="Canonicalise item.")
    canon.add_argument("input", help="The item as JSON.")

    hash_ = sub.add_parser("hash", help="Compute the hash of the given item.")
    hash_.add_argument("input", help="The item as JSON.")
    hash_.add_argument(
        "--force",
        action="store_true",
        default=settings.force,
        help="Hash the canonical form even if the input is not canonical.",
    )
    args = p.parse_args(argv)

    if args.action in ("canon", "fix"):
        try:
            print(to_json(from_json(args.input)))
        except ValueError as err:
            return _fail(err)
        return 0

    try:
        digest = canonical_hash(args.input, force=args.force)
    except ValueError as err:
        return _fail(err)
    print(digest)
    return 0


def _cmd_value(argv: list[str], settings: Settings) -> int:
    p = argparse.ArgumentParser(prog="regitem value", description="Manage values.")
    sub = p.add_subparsers(dest="action", required=True)

    check = sub.add_parser("check", help="Check a value against a datatype.")
    check.add_argument("input", help="The raw value.")
    check.add_argument(
        "--type", dest="kind", required=True, choices=PRIMITIVES, help="Datatype to check."
    )
    check.add_argument(
        "--list",
        action="store_true",
        help="Treat the input as a ';'-separated list of values of --type.",
    )
    args = p.parse_args(argv)

    kind: KindLike = kind_from_value(args.kind)
    if args.list:
        kind = ListKind(kind)
    try:
        value = parse(args.input, kind)
    except InvalidValueError as err:
        logger.debug("value check failed: %r", err)
        return _fail(err.cause if err.cause is not None else err)
    print(f"{value} ({kind})")
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="regitem", description="Registers toolbelt.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("item", help="Manage items.")
    sub.add_parser("value", help="Manage values.")
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = Settings.load()

    verbose = False
    while argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv = argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not argv:
        build_argparser().print_help()
        raise SystemExit(0)
    cmd, rest = argv[0], argv[1:]
    if cmd == "item":
        code = _cmd_item(rest, settings)
    elif cmd == "value":
        code = _cmd_value(rest, settings)
    elif cmd in ("-h", "--help"):
        build_argparser().print_help()
        code = 0
    else:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
