#!/usr/bin/env python3
"""
Command line interface for the FFT length planning toolkit.

Inspect how a transform length is factored and split, look up the Rader
parameters of a prime length, or cross-check the whole toolkit against sympy.

Examples:
  python fft_planner_cli.py factor 44100        # Prime factorization of 44100
  python fft_planner_cli.py partition 1000      # Balanced two-way split of 1000
  python fft_planner_cli.py plan 720 -v         # Full recursive decomposition tree
  python fft_planner_cli.py root 7919           # Primitive root and inverse modulo 7919
  python fft_planner_cli.py check --max-n 5000  # Compare against sympy for n <= 5000
"""

import sys
import argparse

from sympy import factorint
from sympy.ntheory import primitive_root as sympy_primitive_root

from fft_plan import plan_decomposition, leaf_lengths, rader_parameters
from prime_factors import PrimeFactors


def show_factorization(N):
    """Print the factorization of N and its cached statistics."""
    factors = PrimeFactors.compute(N)
    print(f"{factors!r}")
    print(f"  power of two:    {factors.get_power_of_two()}")
    print(f"  power of three:  {factors.get_power_of_three()}")
    print(f"  other factors:   {[tuple(f) for f in factors.get_other_factors()]}")
    print(f"  total factors:   {factors.get_total_factor_count()}")
    print(f"  distinct:        {factors.get_distinct_factor_count()}")
    print(f"  prime:           {factors.is_prime()}")
    return factors


def show_partition(N):
    """Print the balanced split of N."""
    left, right = PrimeFactors.compute(N).partition_factors()
    print(f"{N} = {left.get_product()} × {right.get_product()}")
    print(f"  left:  {left!r}")
    print(f"  right: {right!r}")
    return left, right


def show_plan(N, verbose=False):
    """Print the leaf lengths of the recursive decomposition of N."""
    plan = plan_decomposition(N, verbose=verbose)
    leaves = leaf_lengths(plan)
    print(f"Leaf lengths for N={N}: {' × '.join(str(x) for x in leaves) or '(none)'}")
    return plan


def show_rader_parameters(P):
    params = rader_parameters(P)
    print(f"p={params['prime']}: primitive root g={params['root']}, g^-1={params['root_inverse']}")
    return params


def run_consistency_check(max_n=2000, verbose=False):
    """
    Compare factorization, partitioning and primitive roots against sympy.

    Returns:
        True if every n in 1..max_n passed
    """
    print(f"Checking n = 1 .. {max_n} against sympy")
    print("=" * 60)

    failures = {'factorization': 0, 'partition': 0, 'primitive_root': 0}

    for n in range(1, max_n + 1):
        factors = PrimeFactors.compute(n)

        found = {}
        if factors.get_power_of_two():
            found[2] = factors.get_power_of_two()
        if factors.get_power_of_three():
            found[3] = factors.get_power_of_three()
        for factor in factors.get_other_factors():
            found[factor.value] = factor.count

        if found != factorint(n) or factors.get_product() != n:
            failures['factorization'] += 1
            if verbose:
                print(f"  n={n}: factorization {found} != {factorint(n)} ✗ FAIL")

        if factors.is_prime():
            expected_root = sympy_primitive_root(n)
            root = rader_parameters(n)['root']
            if root != expected_root:
                failures['primitive_root'] += 1
                if verbose:
                    print(f"  p={n}: primitive root {root} != {expected_root} ✗ FAIL")
        elif n > 1:
            left, right = factors.partition_factors()
            if (left.get_product() * right.get_product() != n
                    or left.get_product() <= 1 or right.get_product() <= 1):
                failures['partition'] += 1
                if verbose:
                    print(f"  n={n}: partition {left!r} × {right!r} ✗ FAIL")

    for name, count in failures.items():
        status = "✓ PASS" if count == 0 else "✗ FAIL"
        print(f"{name.replace('_', ' ').title():20}: {count} failures {status}")

    return all(count == 0 for count in failures.values())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Factorization and partition planning for mixed-radix FFT lengths',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s factor 44100        # Prime factorization of 44100
  %(prog)s partition 1000      # Balanced two-way split of 1000
  %(prog)s plan 720 -v         # Full recursive decomposition tree
  %(prog)s root 7919           # Primitive root and inverse modulo 7919
  %(prog)s check --max-n 5000  # Compare against sympy for n <= 5000
        """)

    parser.add_argument('mode', choices=['factor', 'partition', 'plan', 'root', 'check'],
                        help='What to compute: factorization, balanced split, full plan, Rader parameters, or a sympy cross-check')
    parser.add_argument('N', type=int, nargs='?',
                        help='Transform length (prime length for root mode). Not used by check mode.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output to show the decomposition tree or individual failures')
    parser.add_argument('--max-n', type=int, default=2000,
                        help='Largest n covered by check mode (default: 2000)')

    args = parser.parse_args(argv)

    if args.mode != 'check' and args.N is None:
        parser.error(f"{args.mode} mode requires N")

    try:
        if args.mode == 'factor':
            show_factorization(args.N)
        elif args.mode == 'partition':
            show_partition(args.N)
        elif args.mode == 'plan':
            show_plan(args.N, verbose=args.verbose)
        elif args.mode == 'root':
            show_rader_parameters(args.N)
        else:
            if not run_consistency_check(args.max_n, verbose=args.verbose):
                print("❌ Consistency check failed!")
                return 1
            print("✅ All checks passed!")
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
