import pytest

from monadplay import Seq, bind, fmap, foldl, join, prod, unit
from monadplay.combinators import add, identity


def test_unit_wraps_single_value() -> None:
    assert unit(3) == Seq.of(3)
    assert len(unit(None)) == 1


def test_unit_allocates_new_container() -> None:
    a = unit(1)
    b = unit(1)
    a.append(2)
    assert b == Seq.of(1)


def test_prod_empty_returns_empty() -> None:
    assert prod(lambda x: Seq.of(x, x), Seq()) == Seq()


def test_prod_preserves_block_order() -> None:
    result = prod(lambda x: Seq.of(x, x * 10), Seq.of(1, 2, 3))
    assert result == Seq.of(1, 10, 2, 20, 3, 30)


def test_prod_length_is_sum_of_sub_results() -> None:
    xs = Seq.range(6)
    result = prod(lambda x: Seq.range(x), xs)
    assert len(result) == sum(range(6))
    assert result == Seq.of(0, 0, 1, 0, 1, 2, 0, 1, 2, 3, 0, 1, 2, 3, 4)


def test_prod_does_not_consume_input() -> None:
    xs = Seq.of(1, 2, 3)
    prod(unit, xs)
    assert xs == Seq.of(1, 2, 3)


def test_prod_does_not_mutate_transformation_results() -> None:
    shared = Seq.of("x")
    result = prod(lambda _: shared, Seq.of(1, 2))
    assert result == Seq.of("x", "x")
    assert shared == Seq.of("x")


def test_prod_rejects_non_seq_results() -> None:
    with pytest.raises(TypeError, match="list"):
        prod(lambda x: [x], Seq.of(1))


def test_bind_is_prod() -> None:
    assert bind is prod


def test_join_flattens_one_level() -> None:
    xss = Seq.of(Seq.of(1), Seq.of(2, 3), Seq(), Seq.of(4))
    assert join(xss) == Seq.of(1, 2, 3, 4)


def test_join_of_singletons() -> None:
    xs = Seq.range(5)
    assert join(fmap(unit, xs)) == xs


def test_join_leaves_inner_sequences_intact() -> None:
    inner = Seq.of(1, 2)
    join(Seq.of(inner, Seq.of(3)))
    assert inner == Seq.of(1, 2)


def test_fmap_preserves_length_and_order() -> None:
    assert fmap(lambda x: x * x, Seq.of(3, 1, 2)) == Seq.of(9, 1, 4)


def test_fmap_identity() -> None:
    xs = Seq.of("a", "b", "c")
    assert fmap(identity, xs) == xs
    assert fmap(identity, Seq()) == Seq()


def test_foldl_is_left_to_right() -> None:
    assert foldl(lambda acc, x: acc + [x], Seq.of(1, 2, 3), []) == [1, 2, 3]
    assert foldl(lambda acc, x: acc - x, Seq.of(1, 2, 3), 10) == 4


def test_foldl_empty_returns_seed() -> None:
    seed = object()
    assert foldl(add, Seq(), seed) is seed


def test_sum_of_doubles_closed_form() -> None:
    n = 100
    assert foldl(add, fmap(lambda x: 2 * x, Seq.range(n)), 0) == n * (n - 1)


def test_sum_of_squares_closed_form() -> None:
    n = 100
    assert foldl(add, fmap(lambda x: x * x, Seq.range(n)), 0) == (n - 1) * n * (2 * n - 1) // 6
