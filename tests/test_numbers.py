import math

import pytest

from dsakit.numbers import (
    binary_to_decimal,
    decimal_to_binary,
    digit_sum,
    factorial,
    fibonacci,
    is_even,
    is_power_of_two,
    is_prime,
    n_cr,
    power,
    primes_up_to,
    reverse_number,
    sum_to,
)


@pytest.mark.parametrize("n", [0, 7, 1234, 90817])
def test_digit_sum_matches_digits(n):
    assert digit_sum(n) == sum(int(ch) for ch in str(n))


def test_digit_sum_non_positive():
    assert digit_sum(-15) == 0


@pytest.mark.parametrize("n", [0, 1, 5, 10])
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n,r", [(8, 2), (5, 0), (5, 5), (10, 3)])
def test_n_cr(n, r):
    assert n_cr(n, r) == math.comb(n, r)


def test_n_cr_out_of_range():
    with pytest.raises(ValueError):
        n_cr(3, 4)
    with pytest.raises(ValueError):
        n_cr(3, -1)


@pytest.mark.parametrize("n", [0, 1, 5, 10, 100])
def test_sum_to_closed_form(n):
    assert sum_to(n) == n * (n + 1) // 2


def test_fibonacci_recurrence():
    terms = fibonacci(10)
    assert len(terms) == 10
    assert terms[:2] == [0, 1]
    assert all(c == a + b for a, b, c in zip(terms, terms[1:], terms[2:]))


def test_fibonacci_empty():
    assert fibonacci(0) == []


def test_primes_up_to_consistent_with_is_prime():
    primes = primes_up_to(100)
    assert primes == [n for n in range(101) if is_prime(n)]
    assert len(primes) == 25


@pytest.mark.parametrize("n", [5, 7])
def test_is_prime_source_examples(n):
    assert is_prime(n)


def test_is_prime_rejects_composites_and_small():
    assert not is_prime(15)
    assert not is_prime(1)
    assert not is_prime(0)


@pytest.mark.parametrize("n", [0, 1, 8, 67, 1023])
def test_binary_round_trip(n):
    encoded = decimal_to_binary(n)
    assert encoded == int(format(n, "b"))
    assert binary_to_decimal(encoded) == n


def test_binary_to_decimal_rejects_bad_input():
    with pytest.raises(ValueError):
        binary_to_decimal(1021)
    with pytest.raises(ValueError):
        binary_to_decimal(-1)
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


def test_is_power_of_two():
    assert is_power_of_two(2048)
    assert is_power_of_two(1)
    assert not is_power_of_two(0)
    assert not is_power_of_two(2047)
    assert not is_power_of_two(-4)


@pytest.mark.parametrize("n", [1234, 7, 1200])
def test_reverse_number(n):
    assert reverse_number(n) == int(str(n)[::-1])


def test_reverse_number_non_positive():
    assert reverse_number(0) == 0


def test_is_even():
    assert [is_even(n) for n in (0, 1, 2, -3, -4)] == [n % 2 == 0 for n in (0, 1, 2, -3, -4)]


@pytest.mark.parametrize("x,n", [(2.0, 10), (2.0, -2), (1.5, 3), (-3.0, 5), (0.5, 0)])
def test_power_matches_builtin(x, n):
    assert power(x, n) == pytest.approx(x ** n)


def test_power_special_cases():
    assert power(0.0, 5) == 0.0
    assert power(1.0, -7) == 1.0
    assert power(-1.0, 4) == 1.0
    assert power(-1.0, 3) == -1.0