from memoized import Memoized, memoize
from memoized.ops.primes import is_prime


def _counting(func):
    calls = []

    def wrapped(arg):
        calls.append(arg)
        return func(arg)

    return wrapped, calls


def test_cache_hit_skips_recomputation():
    square, calls = _counting(lambda n: n * n)
    memo = memoize(square)
    first = memo.call(12)
    for _ in range(5):
        assert memo.call(12) == first
        assert memo.call_cloned(12) == first
    assert first == 144
    assert calls == [12]


def test_call_count_bounded_by_distinct_arguments():
    double, calls = _counting(lambda n: 2 * n)
    memo = memoize(double)
    args = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5] * 20
    for a in args:
        assert memo.call(a) == 2 * a
    assert len(calls) == len(set(args))
    assert sorted(calls) == sorted(set(args))
    assert len(memo) == len(set(args))


def test_call_returns_stored_object_and_clone_is_decoupled():
    memo = memoize(lambda n: list(range(n)))
    stored = memo.call(3)
    assert memo.call(3) is stored

    cloned = memo.call_cloned(3)
    assert cloned == stored
    assert cloned is not stored
    cloned.append(99)
    assert memo.call(3) == [0, 1, 2]


def test_instances_keep_disjoint_caches():
    square, calls = _counting(lambda n: n * n)
    a = memoize(square)
    b = memoize(square)
    a.call(4)
    assert 4 in a
    assert 4 not in b
    b.call(4)
    assert calls == [4, 4]


def test_failure_propagates_and_is_not_cached():
    calls = []

    def flaky(n):
        calls.append(n)
        if n < 0:
            raise ValueError("negative input")
        return n + 1

    memo = memoize(flaky)
    assert memo.call(1) == 2
    try:
        memo.call(-1)
        assert False
    except ValueError as exc:
        assert "negative" in str(exc)
    assert -1 not in memo
    assert memo.call(1) == 2
    assert calls == [1, -1]


def test_decorator_form_and_call_alias():
    @memoize
    def add_one(n):
        return n + 1

    assert isinstance(add_one, Memoized)
    assert add_one(1) == 2
    assert add_one.call(1) == 2
    assert len(add_one) == 1
    assert "add_one" in repr(add_one)


def test_memoized_is_prime_scenario():
    memo = memoize(is_prime)
    assert memo.call_cloned(7) is True
    assert memo.call_cloned(8) is False
    assert memo.call_cloned(1) is True


def test_tuple_arguments_are_cache_keys():
    memo = memoize(lambda pair: pair[0] * pair[1])
    assert memo.call((3, 4)) == 12
    assert (3, 4) in memo
    assert (4, 3) not in memo


def test_reentrant_store_is_not_overwritten():
    seen = []

    def label(n):
        seen.append(n)
        if len(seen) == 1:
            memo.call(n)
            return "outer"
        return "inner"

    memo = memoize(label)
    assert memo.call(5) == "inner"
    assert memo.call(5) == "inner"
    assert seen == [5, 5]
