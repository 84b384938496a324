#!/usr/bin/env python3
"""
Unified self-test interface for the radix-2 transforms.

Examples:
  dft-check complex 16 -v                # round trips on complex buffers
  dft-check real 64 --num-tests 10       # packed real transform
  dft-check both 1024 --benchmark        # both paths, with timing
  dft-check both --all --dtype float32   # every size from 2 to 4096
  dft-check benchmark --min-N 4 --max-N 65536 --num-runs 20
"""

import argparse
import sys

import numpy as np

from dft.checks import (
    benchmark_transform,
    test_complex_roundtrip,
    test_real_against_complex,
    test_real_roundtrip,
)
from dft.plan import factorize_length

ALL_SIZES = [2 ** k for k in range(1, 13)]

DTYPES = {"float64": np.float64, "float32": np.float32}


def validate_transform_size(N) -> bool:
    """Check that N is a power of two."""
    try:
        factorize_length(N)
    except ValueError:
        return False
    return True


def run_complex(N, args) -> bool:
    print(f"\n🔢 COMPLEX TRANSFORM (N={N})")
    print("-" * 40)
    passed = test_complex_roundtrip(N, args.num_tests, args.dtype, seed=args.seed, verbose=args.verbose)
    if passed:
        print("✅ Complex transform tests passed!")
    else:
        print("❌ Complex transform tests failed!")
    if args.benchmark:
        print("\n📊 Complex transform benchmark:")
        benchmark_transform(N, "complex", args.num_runs, args.dtype, verbose=True)
    return passed


def run_real(N, args) -> bool:
    print(f"\n🔢 REAL TRANSFORM (N={N})")
    print("-" * 40)
    if N < 2:
        print("❌ Real transforms need N >= 2")
        return False
    passed = test_real_roundtrip(N, args.num_tests, args.dtype, seed=args.seed, verbose=args.verbose)
    passed = test_real_against_complex(N, args.num_tests, args.dtype, seed=args.seed, verbose=args.verbose) and passed
    if passed:
        print("✅ Real transform tests passed!")
    else:
        print("❌ Real transform tests failed!")
    if args.benchmark:
        print("\n📊 Real transform benchmark:")
        benchmark_transform(N, "real", args.num_runs, args.dtype, verbose=True)
    return passed


def run_benchmark(args) -> bool:
    print("🚀 TRANSFORM BENCHMARK")
    print("=" * 60)
    print(f"{'N':>8} {'complex (ms)':>14} {'real (ms)':>12}")
    N = args.min_N
    while N <= args.max_N:
        complex_time = benchmark_transform(N, "complex", args.num_runs, args.dtype, verbose=args.verbose)
        real_time = benchmark_transform(N, "real", args.num_runs, args.dtype, verbose=args.verbose)
        print(f"{N:>8} {complex_time*1000:>14.3f} {real_time*1000:>12.3f}")
        N *= 2
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Self-test interface for the radix-2 DFT",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("mode", choices=["complex", "real", "both", "benchmark"],
                        help="Which checks to run")
    parser.add_argument("N", type=int, nargs="?",
                        help="Transform size N (a power of two). Optional if --all is used or in benchmark mode.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print the result of every test vector")
    parser.add_argument("--benchmark", action="store_true",
                        help="Time the transforms after testing them")
    parser.add_argument("--all", action="store_true",
                        help="Test all sizes from 2 to 4096")
    parser.add_argument("--num-tests", type=int, default=3,
                        help="Number of random test vectors (default: 3)")
    parser.add_argument("--dtype", choices=sorted(DTYPES), default="float64",
                        help="Floating type of plans and buffers (default: float64)")
    parser.add_argument("--seed", type=int,
                        help="Seed for the random test vectors")
    parser.add_argument("--min-N", type=int, default=4,
                        help="Smallest N in benchmark mode (default: 4)")
    parser.add_argument("--max-N", type=int, default=4096,
                        help="Largest N in benchmark mode (default: 4096)")
    parser.add_argument("--num-runs", type=int, default=50,
                        help="Number of timing runs per size (default: 50)")

    args = parser.parse_args(argv)
    args.dtype = DTYPES[args.dtype]

    if args.mode == "benchmark":
        if not (validate_transform_size(args.min_N) and validate_transform_size(args.max_N)):
            parser.error("--min-N and --max-N must be powers of two")
        return 0 if run_benchmark(args) else 1

    if not args.all and args.N is None:
        parser.error("Either specify N, use --all flag, or use benchmark mode")
    if args.all and args.N is not None:
        parser.error("Cannot specify both N and --all flag")
    if args.N is not None and not validate_transform_size(args.N):
        print(f"Error: N={args.N} must be a power of two")
        return 1

    sizes = ALL_SIZES if args.all else [args.N]
    results = {}
    for N in sizes:
        print(f"Testing radix-2 transforms for N={N}")
        print("=" * 60)
        if args.mode in ["complex", "both"]:
            results[("complex", N)] = run_complex(N, args)
        if args.mode in ["real", "both"]:
            results[("real", N)] = run_real(N, args)

    failed = [key for key, passed in results.items() if not passed]
    print(f"\nSummary: {len(results) - len(failed)}/{len(results)} checks passed")
    for mode, N in failed:
        print(f"  ✗ {mode} N={N}")
    return 0 if not failed else 1


if __name__ == "__main__":
    sys.exit(main())
