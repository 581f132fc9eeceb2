from typing import List, Optional, Tuple
import math

def modular_exponent(base: int, exponent: int, modulo: int) -> int:
    """Compute (base^exponent) % modulo by repeated squaring."""
    result = 1
    while exponent > 0:
        if exponent & 1 == 1:
            result = (result * base) % modulo
        exponent = exponent >> 1
        base = (base * base) % modulo
    return result

def extended_euclidean_algorithm(a: int, b: int) -> Tuple[int, int, int]:
    """
    Compute (gcd, s, t) such that a*s + b*t = gcd.

    Quotients are truncated toward zero. The gcd is returned with whatever
    sign the recurrence leaves it; for non-positive b the loop never runs
    and (a, 1, 0) comes back unchanged.
    """
    s, s_old = 0, 1
    t, t_old = 1, 0
    r, r_old = b, a

    while r > 0:
        quotient = r_old // r if r_old >= 0 else -(-r_old // r)
        r_old, r = r, r_old - quotient * r
        s_old, s = s, s_old - quotient * s
        t_old, t = t, t_old - quotient * t

    return r_old, s_old, t_old

def multiplicative_inverse(a: int, n: int) -> int:
    """
    Compute the inverse of a modulo n.

    Only the coefficient of a from the extended Euclidean recurrence is
    tracked. Whenever that coefficient would go negative it is wrapped to
    the other end of the modulus instead, so every intermediate stays in
    [0, n].

    Args:
        a: Value to invert
        n: Modulus, coprime to a (typically prime)

    Returns:
        r in [0, n) with a*r = 1 (mod n). The result is meaningless if
        gcd(a, n) != 1; this is not checked.
    """
    t, t_new = 0, 1
    r, r_new = n, a

    while r_new > 0:
        quotient = r // r_new
        r, r_new = r_new, r - quotient * r_new

        # 3 - 4 mod 5 = -1 mod 5 = 4
        t_subtract = quotient * t_new
        if t_subtract < t:
            wrapped = t - t_subtract
        else:
            wrapped = n - (t_subtract - t) % n
        t, t_new = t_new, wrapped

    return t % n

def distinct_prime_factors(n: int) -> List[int]:
    """Return the prime factors of n in ascending order, without repeats."""
    if n <= 0:
        raise ValueError("n must be positive")
    factors = []

    # 2 is handled on its own so the main loop can step over odd numbers
    if n % 2 == 0:
        while n % 2 == 0:
            n //= 2
        factors.append(2)

    if n > 1:
        divisor = 3
        limit = math.isqrt(n) + 1
        while divisor < limit:
            if n % divisor == 0:
                while n % divisor == 0:
                    n //= divisor
                factors.append(divisor)
                limit = math.isqrt(n) + 1
            divisor += 2

        if n > 1:
            factors.append(n)

    return factors

def primitive_root(prime: int) -> Optional[int]:
    """
    Find the smallest primitive root modulo a prime.

    g generates the multiplicative group exactly when g^((p-1)/q) != 1 for
    every distinct prime q dividing p-1. Candidates are tried from 2 upward,
    so every answer is at least 2 except for prime 2: its group is trivial,
    no candidate of 2 or more exists, and 1 is returned as its generator.
    The input is assumed prime and not checked; None is returned only when
    no candidate survives, which means that assumption was broken.
    """
    if prime == 2:
        # the group mod 2 is trivial and generated by 1
        return 1

    phi = prime - 1
    test_exponents = [phi // factor for factor in distinct_prime_factors(phi)]

    for g in range(2, prime):
        if all(modular_exponent(g, exp, prime) != 1 for exp in test_exponents):
            return g

    return None
