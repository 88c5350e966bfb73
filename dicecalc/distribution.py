import math
import typing

from dicecalc.pool import DicePool, dice_string

SumDistribution = typing.Dict[int, int]


def product(xs: typing.Iterable[int]) -> int:
    result = 1
    for x in xs:
        result *= x
    return result


def combination_count(pool: DicePool) -> int:
    return product(die.faces for die in pool)


def average(pool: DicePool, modifier: int = 0) -> float:
    # a die numbered 1..n averages (n + 1) / 2
    return sum(die.faces + 1 for die in pool) / 2 + modifier


def standard_deviation(pool: DicePool) -> float:
    # a die numbered 1..n has variance (n^2 - 1) / 12
    return math.sqrt(sum(die.faces * die.faces - 1 for die in pool) / 12)


def stddev_range(pool: DicePool, modifier: int = 0) -> typing.Tuple[float, float]:
    mean = average(pool, modifier)
    sd = standard_deviation(pool)
    return mean - sd, mean + sd


def shift_distribution(distribution: SumDistribution, modifier: int) -> SumDistribution:
    return {key + modifier: value for key, value in distribution.items()}


def build_sum_distribution(pool: DicePool, modifier: int = 0) -> SumDistribution:
    """Count how many face combinations of ``pool`` produce each sum.

    Every combination is visited exactly once by stepping the pool from all
    ones up to all maximums. The pool's cursors are left at their maximums.
    When ``modifier`` is non-zero a shifted copy of the counts is returned.
    """
    sums: SumDistribution = {}
    pool.reset()
    while True:
        total = sum(die.current for die in pool)
        sums.setdefault(total, 0)
        sums[total] += 1
        if pool.is_at_maximum():
            break
        pool.advance()

    if modifier != 0:
        return shift_distribution(sums, modifier)
    return sums


def cumulative_chance(
    distribution: SumDistribution, combinations: int, target: int
) -> float:
    # sum the integer counts first so a certain outcome is exactly 100
    hits = sum(value for key, value in distribution.items() if key >= target)
    if hits == 0:
        return 0.0
    return hits / combinations * 100


class Statistics(typing.NamedTuple):
    dice: str
    modifier: int
    combinations: int
    average: float
    stddev: float

    @property
    def stddev_range(self) -> typing.Tuple[float, float]:
        return self.average - self.stddev, self.average + self.stddev


def summarize(pool: DicePool, modifier: int = 0) -> Statistics:
    return Statistics(
        dice=dice_string(pool),
        modifier=modifier,
        combinations=combination_count(pool),
        average=average(pool, modifier),
        stddev=standard_deviation(pool),
    )
