"""Generate random one-time pad keys."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence

from otpad.cipher import ALPHABET

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def random_char(rng: random.Random) -> str:
    """Return one random symbol: a capital letter or a space."""
    return ALPHABET[rng.randrange(len(ALPHABET))]


def generate_key(length: int, rng: random.Random | None = None) -> str:
    """Return a random key of the given length."""
    if length <= 0:
        raise ValueError("keylength must be a positive integer")
    rng = rng if rng is not None else random.Random()
    return "".join(random_char(rng) for _ in range(length))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print a random key of the length given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: keygen keylength", file=sys.stderr)
        return 1
    length = _leading_int(args[0])
    if length <= 0:
        print("Error: keylength must be a positive integer", file=sys.stderr)
        return 1
    sys.stdout.write(generate_key(length) + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())