import pytest

from dicecalc.pool import DiceError, DicePool, Die, dice_string


def make_pool(*faces: int) -> DicePool:
    return DicePool(Die(n) for n in faces)


class TestDicePool:
    def test_starts_at_ones(self) -> None:
        assert make_pool(6, 4).faces() == (1, 1)

    def test_empty_pool_rejected(self) -> None:
        with pytest.raises(DiceError):
            DicePool([])

    def test_zero_faces_rejected(self) -> None:
        with pytest.raises(DiceError):
            make_pool(6, 0)

    def test_from_counts_expands_amounts(self) -> None:
        pool = DicePool.from_counts([(2, 20), (1, 6)])
        assert [die.faces for die in pool] == [20, 20, 6]


class TestAdvance:
    def test_increments_last_die(self) -> None:
        pool = make_pool(3, 3)
        pool.advance()
        assert pool.faces() == (1, 2)

    def test_carries_into_previous_die(self) -> None:
        pool = make_pool(3, 2)
        pool.advance()
        pool.advance()
        assert pool.faces() == (2, 1)

    def test_carry_cascades(self) -> None:
        pool = make_pool(2, 2, 2)
        for _ in range(4):
            pool.advance()
        assert pool.faces() == (2, 1, 1)

    def test_reaches_maximum_after_every_combination(self) -> None:
        pool = make_pool(2, 3, 4)
        steps = 0
        while not pool.is_at_maximum():
            pool.advance()
            steps += 1
        assert steps == 2 * 3 * 4 - 1
        assert pool.faces() == (2, 3, 4)

    def test_single_faced_dice_start_at_maximum(self) -> None:
        assert make_pool(1, 1, 1).is_at_maximum()


class TestCombinations:
    def test_visits_every_combination_once(self) -> None:
        combos = list(make_pool(2, 3).combinations())
        assert combos == [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]

    def test_restartable(self) -> None:
        pool = make_pool(4, 2)
        assert list(pool.combinations()) == list(pool.combinations())

    def test_count_matches_product(self) -> None:
        assert len(set(make_pool(4, 6, 3).combinations())) == 72


class TestDiceString:
    def test_coalesces_identical_dice(self) -> None:
        assert dice_string(make_pool(6, 6, 4)) == "2d6 1d4"

    def test_non_adjacent_dice_coalesce(self) -> None:
        assert dice_string(make_pool(6, 4, 6)) == "2d6 1d4"

    def test_repr(self) -> None:
        assert repr(DicePool.from_counts([(1, 6), (2, 6)])) == "3d6"
