# connects command line numbers to the reducers and prints each result

from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional
from .helpers import average, biggest, sum

# example inputs used when no numbers are given
DEFAULT_PAIR = (5, 5)
DEFAULT_AVERAGE_INPUT = [5, 5, 5, 5, 5]
DEFAULT_BIGGEST_INPUT = [1, 15, 3, 2, 4]

logger = logging.getLogger(__name__)

def main(argv: Optional[List[str]] = None) -> int:
    level_name = os.getenv("NUMAGG_LOG_LEVEL", "WARNING").upper()
    # getLevelName maps known names to ints and anything else to a "Level X" string
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        print(f"numagg: unknown NUMAGG_LOG_LEVEL {level_name!r}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level)
    args = sys.argv[1:] if argv is None else argv

    if args:
        try:
            numbers = [float(a) for a in args]
        except ValueError as exc:
            print(f"numagg: not a number: {exc}", file=sys.stderr)
            return 2
        # sum takes the first two; a single number is paired with 0
        pair = (numbers + [0.0])[:2]
        avg_input = big_input = numbers
    else:
        pair, avg_input, big_input = DEFAULT_PAIR, DEFAULT_AVERAGE_INPUT, DEFAULT_BIGGEST_INPUT

    logger.debug("pair=%s average_input=%s biggest_input=%s", pair, avg_input, big_input)
    print(f"The sum result is: {sum(*pair)}")
    print(f"The average result is: {average(avg_input)}")
    print(f"The biggest result is: {biggest(big_input)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
