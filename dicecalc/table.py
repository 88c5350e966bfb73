import io
import typing

import pandas
import plotly.express as px

from dicecalc.distribution import SumDistribution


def distribution_frame(
    distribution: SumDistribution, combinations: int
) -> pandas.DataFrame:
    records = [
        (key, distribution[key], distribution[key] / combinations * 100)
        for key in sorted(distribution)
    ]
    return pandas.DataFrame.from_records(records, columns=["sum", "count", "percent"])


def format_table(frame: pandas.DataFrame) -> str:
    sum_width = max([3] + [len(str(x)) for x in frame["sum"]])
    count_width = max([5] + [len(str(x)) for x in frame["count"]])

    lines: typing.List[str] = [
        "| %s | %s |  Percent |" % ("Sum".rjust(sum_width), "Count".rjust(count_width)),
        "+-%s-+-%s-+----------+" % ("-" * sum_width, "-" * count_width),
    ]
    for key, count, percent in zip(frame["sum"], frame["count"], frame["percent"]):
        lines.append(
            "| %s | %s |  %6.2f%% |"
            % (str(key).rjust(sum_width), str(count).rjust(count_width), percent)
        )
    return "\n".join(lines)


def plot_distribution(frame: pandas.DataFrame, title: str) -> bytes:
    fig = px.bar(frame, x="sum", y="percent", title=title)
    fig.update_xaxes(title_text="sum")
    fig.update_yaxes(title_text="probability", ticksuffix="%")
    stream = io.BytesIO()
    fig.write_image(file=stream, format="png")
    return stream.getvalue()
