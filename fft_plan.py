import numpy as np
from typing import Optional, Tuple

from modular_arithmetic import multiplicative_inverse, primitive_root
from prime_factors import PrimeFactors

def plan_decomposition(n: int, verbose: bool = False) -> dict:
    """
    Recursively split a transform length into balanced two-way factors.

    Args:
        n: Transform length (positive integer)
        verbose: Print the recursion as an indented tree

    Returns:
        Nested dict with keys 'length', 'is_prime' and 'children'. Composite
        lengths have two children whose lengths multiply to 'length'; prime
        lengths and 1 have none.
    """
    return _plan(PrimeFactors.compute(n), verbose, 0)

def _plan(factors: PrimeFactors, verbose: bool, level: int) -> dict:
    indent = "  " * level
    n = factors.get_product()

    if factors.is_prime() or n == 1:
        if verbose:
            print(f"{indent}── {n} ({'prime' if factors.is_prime() else 'unit'})")
        return {'length': n, 'is_prime': factors.is_prime(), 'children': []}

    left, right = factors.partition_factors()
    if verbose:
        print(f"{indent}┌─ {n} = {left.get_product()} × {right.get_product()}")

    children = [_plan(left, verbose, level + 1), _plan(right, verbose, level + 1)]

    if verbose:
        print(f"{indent}└─ {n}")

    return {'length': n, 'is_prime': False, 'children': children}

def leaf_lengths(plan: dict) -> list:
    """Prime lengths at the leaves of a plan, left to right."""
    if not plan['children']:
        return [plan['length']] if plan['is_prime'] else []
    lengths = []
    for child in plan['children']:
        lengths.extend(leaf_lengths(child))
    return lengths

def rader_parameters(prime: int) -> dict:
    """
    Primitive root and its inverse for a prime-length transform.

    Raises:
        ValueError: If prime is not prime, or no primitive root was found
    """
    if not PrimeFactors.compute(prime).is_prime():
        raise ValueError(f"{prime} is not prime")

    root = primitive_root(prime)
    if root is None:
        raise ValueError(f"No primitive root found modulo {prime}")

    return {
        'prime': prime,
        'root': root,
        'root_inverse': multiplicative_inverse(root, prime),
    }

def generator_permutation(prime: int, root: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Index permutations that turn a prime-length DFT into a cyclic convolution.

    Args:
        prime: Transform length
        root: Primitive root to use (default: the smallest one)

    Returns:
        (input_order, output_order): root^k mod prime and root^-k mod prime
        for k = 0 .. prime-2. Each is a permutation of 1 .. prime-1.

    Raises:
        ValueError: If prime is not prime, or root does not generate the group
    """
    if not PrimeFactors.compute(prime).is_prime():
        raise ValueError(f"{prime} is not prime")
    if root is None:
        root = rader_parameters(prime)['root']
    root_inverse = multiplicative_inverse(root, prime)

    size = prime - 1
    input_order = np.zeros(size, dtype=np.int64)
    output_order = np.zeros(size, dtype=np.int64)

    forward = 1
    backward = 1
    for k in range(size):
        input_order[k] = forward
        output_order[k] = backward
        forward = (forward * root) % prime
        backward = (backward * root_inverse) % prime

    if np.unique(input_order).size != size:
        raise ValueError(f"{root} is not a primitive root modulo {prime}")

    return input_order, output_order
