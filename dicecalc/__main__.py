import sys
import typing

import dicecalc.dice_parser as dice_parser
import dicecalc.distribution as distribution
import dicecalc.settings as settings
import dicecalc.table as table
from dicecalc.pool import DiceError, DicePool

USAGE = """Usage: dicecalc <dice>... [+n | -n]... [-s:n]... [-q] [-p:file]

Arguments:
    <dice>  - Space separated dice amounts and types (ex: "2d20 1d6 1d4").
    +n, -n  - Modifiers added to every sum.

Options:
    -s:n    - Print the chance of rolling a sum of n or higher.
              Repeat to ask about several sums.
    -q      - Quick mode. Only print the combinations, average and
              standard deviation. Cannot be combined with -s:n.
    -p:file - Write a bar chart of the distribution to a PNG file.
"""


def format_modifier(modifier: int) -> str:
    return "%+d" % modifier


def print_statistics(stats: distribution.Statistics, precision: int):
    low, high = stats.stddev_range
    print("Dice Rolled: %s" % stats.dice)
    print("Modifier: %s" % format_modifier(stats.modifier))
    print("Combinations: %s" % stats.combinations)
    print("Average Sum: %.*f" % (precision, stats.average))
    print("Standard Deviation: %.*f" % (precision, stats.stddev))
    print("Standard Deviation Range: %.*f to %.*f" % (precision, low, precision, high))


def write_plot(path: str, frame, stats: distribution.Statistics):
    title = stats.dice
    if stats.modifier != 0:
        title += " " + format_modifier(stats.modifier)
    try:
        data = table.plot_distribution(frame, title)
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, RuntimeError, ValueError) as e:
        raise DiceError("Could not write plot to %s: %s" % (path, e))


def run(args: dice_parser.Arguments, config: typing.Dict[str, typing.Any]) -> int:
    pool = DicePool.from_counts(args.dice)
    stats = distribution.summarize(pool, args.modifier)

    if not args.quick and stats.combinations > config["max_combinations"]:
        raise DiceError(
            "%s has %s combinations, more than the limit of %s. Use -q instead."
            % (stats.dice, stats.combinations, config["max_combinations"])
        )

    if args.quick:
        print_statistics(stats, config["precision"])
        return 0

    sums = distribution.build_sum_distribution(pool, args.modifier)
    frame = table.distribution_frame(sums, stats.combinations)
    # nothing is printed until the plot, if any, is safely on disk
    if args.plot is not None:
        write_plot(args.plot, frame, stats)

    print_statistics(stats, config["precision"])
    print()
    print(table.format_table(frame))

    if args.queries:
        print()
    for target in args.queries:
        print(
            "Chance of rolling sum of %s or higher: %.2f%%"
            % (target, distribution.cumulative_chance(sums, stats.combinations, target))
        )

    if args.plot is not None:
        print()
        print("Plot written to %s" % args.plot)
    return 0


def main(argv: typing.List[str] = sys.argv) -> int:
    args = argv[1:]
    if len(args) == 0:
        print(USAGE)
        return 0

    try:
        parsed = dice_parser.parse_arguments(args)
        return run(parsed, settings.load_settings())
    except DiceError as e:
        print("ERROR: %s" % e.args[0])
        return 1


if __name__ == "__main__":
    sys.exit(main())
