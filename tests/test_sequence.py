import pytest

from monadplay import Seq


def test_append_and_iterate() -> None:
    xs: Seq[int] = Seq()
    xs.append(1)
    xs.append(2)
    assert list(xs) == [1, 2]
    assert len(xs) == 2


def test_range_is_iota() -> None:
    assert Seq.range(5) == Seq.of(0, 1, 2, 3, 4)
    assert Seq.range(0).empty()


def test_splice_moves_elements_and_empties_donor() -> None:
    head = Seq.of(1, 2)
    tail = Seq.of(3, 4)
    head.splice(tail)
    assert head == Seq.of(1, 2, 3, 4)
    assert tail.empty()


def test_splice_into_self_rejected() -> None:
    xs = Seq.of(1)
    with pytest.raises(ValueError):
        xs.splice(xs)


def test_pop_front() -> None:
    xs = Seq.of("a", "b")
    assert xs.front() == "a"
    assert xs.pop_front() == "a"
    assert xs == Seq.of("b")


def test_front_on_empty_raises() -> None:
    with pytest.raises(IndexError):
        Seq().front()
    with pytest.raises(IndexError):
        Seq().pop_front()


def test_equality_is_order_sensitive() -> None:
    assert Seq.of(1, 2) != Seq.of(2, 1)
    assert Seq.of(1, 2) == Seq.of(1, 2)
    assert Seq.of(1) != [1]


def test_copy_is_independent() -> None:
    xs = Seq.of(1, 2)
    ys = xs.copy()
    ys.append(3)
    assert xs == Seq.of(1, 2)


def test_bool_and_empty() -> None:
    assert not Seq()
    assert Seq.of(0)
    assert Seq().empty()


def test_method_surface_matches_free_functions() -> None:
    xs = Seq.range(4)
    assert Seq.start(7) == Seq.of(7)
    assert xs.then(lambda x: Seq.of(x, x)) == Seq.of(0, 0, 1, 1, 2, 2, 3, 3)
    assert xs.map(lambda x: x + 1) == Seq.of(1, 2, 3, 4)
    assert xs.fold(lambda acc, x: acc + x, 10) == 16


def test_list_conversion_goes_through_iteration() -> None:
    xs = Seq.range(3)
    assert list(xs) == [0, 1, 2]
    assert not hasattr(xs, "to_list")
