import typing


class DiceError(ValueError):
    pass


class Die:
    def __init__(self, faces: int) -> None:
        self.faces = faces
        self.current = 1

    def at_maximum(self) -> bool:
        return self.current == self.faces

    def __repr__(self) -> str:
        return "1d%s" % self.faces


class DicePool:
    """An ordered set of dice that can be stepped through every face combination.

    The current faces of the pool behave like a mixed-radix number: each die is
    a digit counting from 1 up to its number of faces, and the last die is the
    least significant one.
    """

    def __init__(self, dice: typing.Iterable[Die]) -> None:
        self.dice: typing.List[Die] = list(dice)
        if len(self.dice) == 0:
            raise DiceError("a dice pool needs at least one die")
        for die in self.dice:
            if die.faces < 1:
                raise DiceError("attempted to use a die with %s faces" % die.faces)

    @classmethod
    def from_counts(
        cls, counts: typing.Iterable[typing.Tuple[int, int]]
    ) -> "DicePool":
        return cls(Die(faces) for amount, faces in counts for _ in range(amount))

    def __len__(self) -> int:
        return len(self.dice)

    def __iter__(self) -> typing.Iterator[Die]:
        return iter(self.dice)

    def __repr__(self) -> str:
        return dice_string(self)

    def faces(self) -> typing.Tuple[int, ...]:
        return tuple(die.current for die in self.dice)

    def reset(self):
        for die in self.dice:
            die.current = 1

    def is_at_maximum(self) -> bool:
        return all(die.at_maximum() for die in self.dice)

    def advance(self):
        self.dice[-1].current += 1
        for i in range(len(self.dice) - 1, -1, -1):
            die = self.dice[i]
            if die.current <= die.faces:
                break
            die.current = 1
            # the carry out of the first die is dropped
            if i > 0:
                self.dice[i - 1].current += 1

    def combinations(self) -> typing.Iterator[typing.Tuple[int, ...]]:
        self.reset()
        yield self.faces()
        while not self.is_at_maximum():
            self.advance()
            yield self.faces()


def dice_string(dice: typing.Iterable[Die]) -> str:
    amounts: typing.Dict[int, int] = {}
    for die in dice:
        amounts.setdefault(die.faces, 0)
        amounts[die.faces] += 1
    return " ".join("%sd%s" % (amount, faces) for faces, amount in amounts.items())
