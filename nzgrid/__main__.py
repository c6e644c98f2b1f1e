"""
Round-trip accuracy check for the NZTM conversion.

Reads "easting northing" pairs from standard input until it is exhausted or a value
cannot be parsed. Each pair is converted to latitude/longitude and back, and the
recovered coordinates are printed along with the difference from the input.

    $ echo "1576041.15 6188574.24" | python -m nzgrid
"""

__all__ = ['format_round_trip', 'main', 'read_pairs']

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from nzgrid._const import RAD2DEG
from nzgrid.nztm import geodetic_to_nztm, nztm_to_geodetic
from nzgrid.utils.logging import LOGGER


def read_pairs(lines: Iterable[str]) -> Iterator[Tuple[float, float]]:
    """
    Yields (easting, northing) pairs from whitespace separated text.

    Stops at the end of input, at a dangling value, or at the first token that is
    not a number.
    """
    tokens = (token for line in lines for token in line.split())
    for easting in tokens:
        northing = next(tokens, None)
        if northing is None:
            LOGGER.warning('Ignoring unpaired value %r at end of input', easting)
            return

        try:
            pair = float(easting), float(northing)
        except ValueError:
            LOGGER.warning('Stopped reading at malformed input %r %r', easting, northing)
            return

        yield pair


def format_round_trip(easting: float, northing: float, validate: bool = False) -> str:
    """Converts a NZTM pair to lat/lon and back, and formats the report"""
    lt, ln = nztm_to_geodetic(northing, easting, validate=validate)
    n1, e1 = geodetic_to_nztm(lt, ln, validate=validate)

    return '\n'.join([
        'Input NZTM e,n:  %12.3f %12.3f' % (easting, northing),
        'Output Lat/Long: %12.6f %12.6f' % (lt * RAD2DEG, ln * RAD2DEG),
        'Output NZTM e,n: %12.3f %12.3f' % (e1, n1),
        'Difference:      %12.3f %12.3f' % (e1 - easting, n1 - northing),
        '',
    ])


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog='nzgrid',
        description='Round trip NZTM coordinates through latitude/longitude.',
    )
    parser.add_argument(
        '--validate', action='store_true',
        help='reject non-finite coordinates and warn about coordinates outside NZTM',
    )
    args = parser.parse_args(argv)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    for easting, northing in read_pairs(stdin):
        try:
            report = format_round_trip(easting, northing, validate=args.validate)
        except ValueError as exc:
            LOGGER.error('Skipping %s %s: %s', easting, northing, exc)
            continue

        print(report, file=stdout)

    return 0


if __name__ == '__main__':
    sys.exit(main())
