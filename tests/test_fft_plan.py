"""
Tests for the recursive decomposition plan and Rader parameters.
"""

import math

import numpy as np
import pytest
from sympy import factorint, primerange

from fft_plan import generator_permutation, leaf_lengths, plan_decomposition, rader_parameters


def walk(node):
    yield node
    for child in node['children']:
        yield from walk(child)


class TestPlanDecomposition:

    def test_720(self):
        plan = plan_decomposition(720)

        assert plan['length'] == 720
        assert [child['length'] for child in plan['children']] == [45, 16]
        assert leaf_lengths(plan) == [5, 3, 3, 2, 2, 2, 2]

    def test_children_multiply_to_parent(self):
        for n in range(2, 1500):
            plan = plan_decomposition(n)
            for node in walk(plan):
                if node['children']:
                    left, right = node['children']
                    assert left['length'] * right['length'] == node['length']
                    assert left['length'] > 1 and right['length'] > 1
                    assert not node['is_prime']
                else:
                    assert node['is_prime']

    def test_leaves_are_prime_factorization(self):
        for n in (12, 360, 1000, 44100, 2 ** 10 * 7, 997 * 991):
            leaves = leaf_lengths(plan_decomposition(n))
            assert math.prod(leaves) == n
            expected = sorted(p for p, e in factorint(n).items() for _ in range(e))
            assert sorted(leaves) == expected

    def test_prime_length(self):
        plan = plan_decomposition(7)
        assert plan == {'length': 7, 'is_prime': True, 'children': []}
        assert leaf_lengths(plan) == [7]

    def test_length_one(self):
        plan = plan_decomposition(1)
        assert plan == {'length': 1, 'is_prime': False, 'children': []}
        assert leaf_lengths(plan) == []

    def test_verbose_prints_tree(self, capsys):
        plan_decomposition(36, verbose=True)
        out = capsys.readouterr().out

        assert "┌─ 36 = 6 × 6" in out
        assert "  ┌─ 6 = 2 × 3" in out
        assert "── 3 (prime)" in out
        assert "└─ 36" in out

    def test_quiet_by_default(self, capsys):
        plan_decomposition(36)
        assert capsys.readouterr().out == ""

    def test_rejects_invalid_length(self):
        with pytest.raises(ValueError):
            plan_decomposition(0)


class TestRaderParameters:

    @pytest.mark.parametrize("prime, root", [(3, 2), (7, 3), (11, 2), (47, 5), (7919, 7)])
    def test_known_roots(self, prime, root):
        params = rader_parameters(prime)
        assert params['prime'] == prime
        assert params['root'] == root
        assert params['root'] * params['root_inverse'] % prime == 1

    def test_inverse_in_range(self):
        for p in primerange(2, 500):
            params = rader_parameters(p)
            assert 0 <= params['root_inverse'] < p
            assert params['root'] * params['root_inverse'] % p == 1 % p

    @pytest.mark.parametrize("n", [1, 4, 9, 7917])
    def test_rejects_non_prime(self, n):
        with pytest.raises(ValueError):
            rader_parameters(n)


class TestGeneratorPermutation:

    def test_seven(self):
        input_order, output_order = generator_permutation(7)

        assert input_order.dtype == np.int64
        assert input_order.tolist() == [1, 3, 2, 6, 4, 5]
        assert output_order.tolist() == [1, 5, 4, 6, 2, 3]

    def test_permutations_of_nonzero_residues(self):
        for p in primerange(3, 300):
            input_order, output_order = generator_permutation(p)
            expected = np.arange(1, p)
            np.testing.assert_array_equal(np.sort(input_order), expected)
            np.testing.assert_array_equal(np.sort(output_order), expected)

    def test_orders_are_inverse(self):
        p = 101
        input_order, output_order = generator_permutation(p)
        np.testing.assert_array_equal((input_order * output_order) % p, np.ones(p - 1, dtype=np.int64))

    def test_explicit_root(self):
        input_order, _ = generator_permutation(7, root=5)
        assert input_order.tolist() == [1, 5, 4, 6, 2, 3]

    def test_rejects_non_primitive_root(self):
        with pytest.raises(ValueError):
            generator_permutation(7, root=2)

    @pytest.mark.parametrize("n, root", [(0, 3), (1, 2), (9, 2), (-7, 3)])
    def test_rejects_non_prime_length_with_explicit_root(self, n, root):
        with pytest.raises(ValueError):
            generator_permutation(n, root=root)

    @pytest.mark.parametrize("n", [1, 9, 12])
    def test_rejects_non_prime_length(self, n):
        with pytest.raises(ValueError):
            generator_permutation(n)
