from memoized.ops.fibonacci import (
    fib_iterative,
    fib_recursive,
    fibonacci_range,
    memoized_fib,
    memoized_fib_iterative,
)


def test_plain_variants_agree():
    for n in range(25):
        assert fib_iterative(n) == fib_recursive(n)


def test_memoized_variants_agree_with_reference():
    rec = memoized_fib()
    it = memoized_fib_iterative()
    for n in range(31):
        assert rec.call_cloned(n) == fib_recursive(n)
        assert it.call_cloned(n) == fib_recursive(n)


def test_fibonacci_range_is_inclusive():
    fib = memoized_fib()
    pairs = list(fibonacci_range(fib.call, 5, 10))
    assert pairs == [(5, 5), (6, 8), (7, 13), (8, 21), (9, 34), (10, 55)]
    assert list(fibonacci_range(fib.call, 7, 7)) == [(7, 13)]
    assert list(fibonacci_range(fib.call, 8, 7)) == []
