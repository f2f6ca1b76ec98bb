#!/usr/bin/env python3

# generate an N-dimensional Sobol sequence of samples
# see:
#   https://extremelearning.com.au/unreasonable-effectiveness-of-quasirandom-sequences/
#   https://web.maths.unsw.edu.au/~fkuo/sobol/ (direction numbers)

import argparse
import logging
import sys
from math import pi

import numpy as np
from scipy.stats import qmc

import sobol

logger = logging.getLogger("gen-samples")

# defaults: a 2D sequence of 32 points
DIMS  = 2
COUNT = 32


def box_muller(u):
    # pair up columns (u1, u2) -> two independent N(0,1) columns
    z = np.empty(u.shape)
    u1, u2 = u[:, 0::2], u[:, 1::2]
    r = np.sqrt(-2 * np.log(u1))
    z[:, 0::2] = r * np.cos(2 * pi * u2)
    z[:, 1::2] = r * np.sin(2 * pi * u2)
    return z


def build_parser():
    parser = argparse.ArgumentParser(description="Print samples from a Sobol sequence")
    parser.add_argument("-d", "--dims", type=int, default=None, help=f"number of dimensions (default {DIMS})")
    parser.add_argument("-n", "--count", type=int, default=COUNT, help="number of points")
    parser.add_argument("--skip", type=int, default=0, help="burn-in points to skip first")
    parser.add_argument("--exact", action="store_true", help="skip exactly --skip points instead of 2^m-1")
    parser.add_argument("--lb", type=float, nargs="+", help="lower bounds of the sample box")
    parser.add_argument("--ub", type=float, nargs="+", help="upper bounds of the sample box")
    parser.add_argument("--gaussian", action="store_true", help="map pairs of dimensions to normal samples")
    parser.add_argument("--directions", metavar="PATH", help="Joe-Kuo direction number file")
    parser.add_argument("--discrepancy", action="store_true", help="report the centered L2 discrepancy")
    parser.add_argument("--csv", action="store_true", help="print comma separated values")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.DEBUG)

    scaled = args.lb is not None or args.ub is not None
    if scaled and (args.lb is None or args.ub is None):
        parser.error("--lb and --ub must be given together")
    if scaled and args.gaussian:
        parser.error("--gaussian samples the unit cube; drop --lb/--ub")
    d = args.dims
    if d is None:
        d = len(args.lb) if scaled else DIMS
    if args.gaussian and d % 2:
        parser.error("--gaussian needs an even number of dimensions")
    if args.count < 0:
        parser.error("--count must not be negative")
    if args.discrepancy and (args.gaussian or args.count == 0 or d == 0):
        parser.error("--discrepancy needs unit-cube samples")

    data = None
    if args.directions:
        data = sobol.load_joe_kuo(args.directions, max_dimension=d)
        logger.info("loaded direction numbers for %d dimensions from %s", data.max_dimension, args.directions)

    try:
        if scaled:
            s = sobol.sobol_seq(d, args.lb, args.ub, data=data)
        else:
            s = sobol.sobol_seq(d, data=data)
    except (sobol.InvalidDimension, sobol.DimensionMismatch) as e:
        parser.error(str(e))

    logger.info("%s", s)
    s.skip(args.skip, exact=args.exact)
    u = s.take(args.count)

    if args.gaussian:
        u = box_muller(u)

    if args.csv:
        np.savetxt(sys.stdout, u, delimiter=",")
    else:
        print(u)

    if args.discrepancy:
        unit = u
        if scaled:
            unit = qmc.scale(u, s.lb, s.ub, reverse=True)
        print(f"discrepancy (CD): {qmc.discrepancy(unit)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
