"""Inspect bit vectors from the command line.

Each token, given as an argument or read from stdin, is parsed into a vector,
the requested operations are applied in order and a summary table is printed::

    $ python -m dynbitset.cli 10110 0000000011 --shift-left 2 --flip 0

"""

import argparse
import logging
import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

import tabulate

from dynbitset.api import load
from dynbitset.bitvector import BitVector
from dynbitset.exceptions import BitVectorError, InvalidSize

logger = logging.getLogger(__name__)

HEADERS = ("value", "size", "words", "count", "any", "all", "none", "uint64")

Operation = Tuple[str, int]


class AppendOperation(argparse.Action):
    """Record an operation and its argument, keeping command line order."""

    def __call__(self, parser, namespace, values, option_string=None):  # type: ignore
        operations = getattr(namespace, self.dest) or []
        operations.append((self.const, values))
        setattr(namespace, self.dest, operations)


def apply(vector: BitVector, operations: Sequence[Operation]) -> BitVector:
    """Apply `operations` to `vector` in place and return it."""
    for name, argument in operations:
        logger.debug("applying %s(%d) to %r", name, argument, vector)
        getattr(vector, name)(argument)
    return vector


def iter_vectors(tokens: Sequence[str], stream: TextIO) -> Iterator[BitVector]:
    """Yield a vector per token, or per token of `stream` if there are none."""
    if tokens:
        yield from map(BitVector.from_string, tokens)
        return
    while True:
        try:
            yield load(stream)
        except InvalidSize:
            # an exhausted stream yields an empty token
            return


def summarize(vector: BitVector) -> List[object]:
    """Return the row of the summary table describing `vector`."""
    info = vector.debug_info()
    return [
        vector.to_string(),
        info["size"],
        info["word_count"],
        info["count"],
        vector.any(),
        vector.all(),
        vector.none(),
        vector.to_uint64(),
    ]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Parse binary digit strings into bit vectors and describe them.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "tokens",
        nargs="*",
        help="Binary digit strings, most significant bit first. Read from stdin "
        "when omitted.",
    )
    for flag, name in (
        ("--shift-left", "shift_left"),
        ("--shift-right", "shift_right"),
        ("--set", "set"),
        ("--reset", "reset"),
        ("--flip", "flip"),
    ):
        p.add_argument(
            flag,
            dest="operations",
            action=AppendOperation,
            const=name,
            type=int,
            metavar="N",
            help=f"Apply {name.replace('_', ' ')} with argument N.",
        )
    p.add_argument(
        "-t",
        "--tablefmt",
        default="simple",
        help="The tabulate table format.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every operation.",
    )
    return p.parse_args(argv)


def main(
    *,
    tokens: Sequence[str],
    operations: Sequence[Operation],
    tablefmt: str,
    stream: Optional[TextIO] = None,
) -> int:
    """Print a table describing each vector after applying `operations`."""
    rows = []
    try:
        for vector in iter_vectors(tokens, stream or sys.stdin):
            rows.append(summarize(apply(vector, operations)))
    except BitVectorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(
        tabulate.tabulate(
            rows, headers=HEADERS, tablefmt=tablefmt, disable_numparse=True
        )
    )
    return 0


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point of the ``dynbitset`` command."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s %(message)s",
    )
    sys.exit(
        main(
            tokens=args.tokens,
            operations=args.operations or [],
            tablefmt=args.tablefmt,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    run()
