import pytest

from judgekit.numbers import (
    closest_blackjack,
    count_primes,
    divisibility,
    from_base,
    kth_divisor,
    perfect_number_report,
    prime_factors,
    prime_sum_and_min,
    sieve,
    smallest_generator,
    to_base,
)


def test_sieve_small_primes():
    flags = sieve(30)
    assert [i for i, is_prime in enumerate(flags) if is_prime] == [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
    ]


def test_sieve_length_and_edges():
    flags = sieve(1)
    assert flags == [False, False]
    with pytest.raises(ValueError):
        sieve(-1)


@pytest.mark.parametrize("n", [0, 1, 7, 60466175, 123456789])
@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_base_round_trip(n, base):
    assert from_base(to_base(n, base), base) == n


def test_to_base_zero():
    assert to_base(0, 7) == "0"


def test_to_base_hex():
    assert to_base(255, 16) == "FF"


def test_base_errors():
    with pytest.raises(ValueError):
        to_base(5, 1)
    with pytest.raises(ValueError):
        to_base(-3, 10)
    with pytest.raises(ValueError):
        from_base("1!", 10)


@pytest.mark.parametrize("n", [2, 12, 97, 1024, 9999991, 720720])
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    product = 1
    for factor in factors:
        product *= factor
    assert product == n
    assert factors == sorted(factors)
    flags = sieve(max(factors))
    assert all(flags[f] for f in factors)


def test_prime_factors_of_one_and_prime():
    assert prime_factors(1) == []
    assert prime_factors(13) == [13]
    with pytest.raises(ValueError):
        prime_factors(0)


def test_count_primes():
    assert count_primes([1, 3, 5, 7]) == 3
    assert count_primes([1, 4, 1000]) == 0


def test_prime_sum_and_min_invariants():
    result = prime_sum_and_min(60, 100)
    assert result is not None
    total, smallest = result
    flags = sieve(100)
    assert flags[smallest] and smallest >= 60
    assert not any(flags[60:smallest])
    assert total == sum(i for i in range(60, 101) if flags[i])


def test_prime_sum_and_min_single_and_none():
    assert prime_sum_and_min(13, 13) == (13, 13)
    assert prime_sum_and_min(14, 16) is None


@pytest.mark.parametrize("n", [216, 1000, 29, 198])
def test_smallest_generator(n):
    found = smallest_generator(n)
    if found:
        assert found + sum(int(ch) for ch in str(found)) == n
    assert all(
        m + sum(int(ch) for ch in str(m)) != n for m in range(1, found or n)
    )


def test_smallest_generator_none():
    assert smallest_generator(1) == 0


def test_kth_divisor():
    assert kth_divisor(36, 1) == 1
    assert 36 % kth_divisor(36, 4) == 0
    assert kth_divisor(7, 2) == 7
    assert kth_divisor(7, 3) == 0
    with pytest.raises(ValueError):
        kth_divisor(7, 0)


def test_divisibility():
    assert divisibility(8, 4) == "multiple"
    assert divisibility(4, 8) == "factor"
    assert divisibility(5, 7) == "neither"


def test_perfect_number_report():
    assert perfect_number_report(6) == "6 = 1 + 2 + 3"
    assert perfect_number_report(12) == "12 is NOT perfect."


def test_perfect_number_terms_add_up():
    report = perfect_number_report(28)
    head, terms = report.split(" = ")
    assert head == "28"
    assert sum(int(t) for t in terms.split(" + ")) == 28


def test_closest_blackjack():
    cards = [5, 6, 7, 8, 9]
    assert closest_blackjack(cards, 21) == 21
    result = closest_blackjack(cards, 20)
    assert result <= 20
    assert closest_blackjack(cards, result) == result


def test_closest_blackjack_errors():
    with pytest.raises(ValueError):
        closest_blackjack([5, 6], 100)
    with pytest.raises(ValueError):
        closest_blackjack([50, 60, 70], 10)