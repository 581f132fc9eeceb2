from typing import NamedTuple, Optional, Tuple
import math
import numbers

class PrimeFactor(NamedTuple):
    """A prime power value^count."""
    value: int
    count: int

class PrimeFactors:
    """
    Prime factorization of a positive integer, as used to plan mixed-radix FFTs.

    The factorization is kept in three parts: the power of two, the power of
    three, and the remaining prime powers in the order they were found. Total
    and distinct factor counts are cached alongside.

    Instances are never modified after construction. remove_factors() and
    partition_factors() leave the receiver alone and hand back new instances,
    so a factorization can be shared freely once built.
    """

    __slots__ = ('_n', '_power_two', '_power_three', '_other_factors',
                 '_total_factor_count', '_distinct_factor_count')

    def __init__(self, n: int, power_two: int, power_three: int,
                 other_factors: Tuple[PrimeFactor, ...],
                 total_factor_count: int, distinct_factor_count: int):
        self._n = n
        self._power_two = power_two
        self._power_three = power_three
        self._other_factors = tuple(other_factors)
        self._total_factor_count = total_factor_count
        self._distinct_factor_count = distinct_factor_count

    @classmethod
    def compute(cls, n: int) -> 'PrimeFactors':
        """
        Factor n by trial division.

        Args:
            n: Positive integer to factor

        Returns:
            PrimeFactors whose product is n

        Raises:
            ValueError: If n is not a positive integer
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise ValueError(f"n must be a positive integer, got {n!r}")
        n = int(n)

        total_factor_count = 0
        distinct_factor_count = 0

        # Powers of two come straight from the trailing zero bits
        power_two = (n & -n).bit_length() - 1
        remaining = n >> power_two
        total_factor_count += power_two
        if power_two > 0:
            distinct_factor_count += 1

        power_three = 0
        while remaining % 3 == 0:
            remaining //= 3
            power_three += 1
        total_factor_count += power_three
        if power_three > 0:
            distinct_factor_count += 1

        other_factors = []
        if remaining > 1:
            divisor = 5
            # No factor can be found at or past this limit; it shrinks as factors are divided out
            limit = math.isqrt(remaining) + 1
            while divisor < limit:
                count = 0
                while remaining % divisor == 0:
                    remaining //= divisor
                    count += 1

                if count > 0:
                    other_factors.append(PrimeFactor(divisor, count))
                    total_factor_count += count
                    distinct_factor_count += 1
                    limit = math.isqrt(remaining) + 1

                divisor += 2

            # Whatever survives the limit is itself prime
            if remaining > 1:
                other_factors.append(PrimeFactor(remaining, 1))
                total_factor_count += 1
                distinct_factor_count += 1

        return cls(n, power_two, power_three, tuple(other_factors),
                   total_factor_count, distinct_factor_count)

    @classmethod
    def _prime_power(cls, prime: int, exponent: int) -> 'PrimeFactors':
        """Factorization of prime^exponent for exponent >= 1."""
        if prime == 2:
            return cls(1 << exponent, exponent, 0, (), exponent, 1)
        if prime == 3:
            return cls(3 ** exponent, 0, exponent, (), exponent, 1)
        return cls(prime ** exponent, 0, 0, (PrimeFactor(prime, exponent),), exponent, 1)

    def is_prime(self) -> bool:
        return self._total_factor_count == 1

    def get_product(self) -> int:
        return self._n

    def get_total_factor_count(self) -> int:
        return self._total_factor_count

    def get_distinct_factor_count(self) -> int:
        return self._distinct_factor_count

    def get_power_of_two(self) -> int:
        return self._power_two

    def get_power_of_three(self) -> int:
        return self._power_three

    def get_other_factors(self) -> Tuple[PrimeFactor, ...]:
        return self._other_factors

    def remove_factors(self, factor: PrimeFactor) -> Optional['PrimeFactors']:
        """
        Divide out factor.value^factor.count.

        Returns:
            A new PrimeFactors for the quotient, or None if the quotient is 1

        Raises:
            ValueError: If factor.value is not a prime factor of this number,
                or factor.count exceeds its stored multiplicity
        """
        value, count = factor
        if count < 0:
            raise ValueError(f"Cannot remove a negative count of {value} (got {count})")
        if count == 0:
            return PrimeFactors(self._n, self._power_two, self._power_three, self._other_factors,
                                self._total_factor_count, self._distinct_factor_count)

        power_two = self._power_two
        power_three = self._power_three
        other_factors = list(self._other_factors)
        distinct_factor_count = self._distinct_factor_count

        if value == 2:
            if count > power_two:
                raise ValueError(f"Cannot remove 2^{count} from {self._n}: only 2^{power_two} present")
            power_two -= count
            if power_two == 0:
                distinct_factor_count -= 1
        elif value == 3:
            if count > power_three:
                raise ValueError(f"Cannot remove 3^{count} from {self._n}: only 3^{power_three} present")
            power_three -= count
            if power_three == 0:
                distinct_factor_count -= 1
        else:
            index = next((i for i, item in enumerate(other_factors) if item.value == value), None)
            if index is None:
                raise ValueError(f"{value} is not a prime factor of {self._n}")
            stored = other_factors[index]
            if count > stored.count:
                raise ValueError(f"Cannot remove {value}^{count} from {self._n}: only {value}^{stored.count} present")
            if stored.count == count:
                del other_factors[index]
                distinct_factor_count -= 1
            else:
                other_factors[index] = PrimeFactor(value, stored.count - count)

        n = self._n // value ** count
        if n == 1:
            return None
        return PrimeFactors(n, power_two, power_three, tuple(other_factors),
                            self._total_factor_count - count, distinct_factor_count)

    def partition_factors(self) -> Tuple['PrimeFactors', 'PrimeFactors']:
        """
        Split into two factorizations whose products multiply back to this one
        and are as close to each other as the heuristic can get them.

        Perfect squares split into two copies of the square root. A single
        prime power p^k splits into p^(k - k//2) and p^(k//2). Anything else
        is balanced greedily: each larger prime power, then the whole power of
        two, then the whole power of three goes to whichever side currently
        has the smaller product.

        Raises:
            ValueError: If this number is prime or 1
        """
        if self.is_prime():
            raise ValueError(f"Cannot partition prime {self._n}")
        if self._n == 1:
            raise ValueError("Cannot partition 1")

        if (self._power_two % 2 == 0 and self._power_three % 2 == 0
                and all(factor.count % 2 == 0 for factor in self._other_factors)):
            power_two = self._power_two // 2
            power_three = self._power_three // 2
            other_factors = tuple(PrimeFactor(factor.value, factor.count // 2)
                                  for factor in self._other_factors)

            root = (1 << power_two) * 3 ** power_three
            for factor in other_factors:
                root *= factor.value ** factor.count

            half = PrimeFactors(root, power_two, power_three, other_factors,
                                self._total_factor_count // 2, self._distinct_factor_count)
            return half, half

        if self._distinct_factor_count == 1:
            if self._other_factors:
                prime, exponent = self._other_factors[0]
            elif self._power_two > 0:
                prime, exponent = 2, self._power_two
            else:
                prime, exponent = 3, self._power_three

            low = exponent // 2
            return self._prime_power(prime, exponent - low), self._prime_power(prime, low)

        left_product = 1
        right_product = 1
        for factor in self._other_factors:
            if left_product <= right_product:
                left_product *= factor.value ** factor.count
            else:
                right_product *= factor.value ** factor.count

        for block in (1 << self._power_two, 3 ** self._power_three):
            if left_product <= right_product:
                left_product *= block
            else:
                right_product *= block

        # Re-factor both halves from scratch rather than carrying the factor lists across
        return PrimeFactors.compute(left_product), PrimeFactors.compute(right_product)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeFactors):
            return NotImplemented
        return (self._n == other._n and self._power_two == other._power_two
                and self._power_three == other._power_three
                and self._other_factors == other._other_factors)

    def __hash__(self) -> int:
        return hash((self._n, self._power_two, self._power_three, self._other_factors))

    def __repr__(self) -> str:
        parts = []
        if self._power_two:
            parts.append(f"2^{self._power_two}")
        if self._power_three:
            parts.append(f"3^{self._power_three}")
        parts.extend(f"{factor.value}^{factor.count}" for factor in self._other_factors)
        return f"PrimeFactors({self._n} = {' * '.join(parts) or '1'})"
