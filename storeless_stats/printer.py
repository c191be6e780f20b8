import sys

SUMMARY_COLUMNS = ("statistic", "n", "result")


def summary_table(statistics, columns=SUMMARY_COLUMNS, separator=" | ") -> str:
    """
    Renders the summary() of every statistic as one row of a left aligned text table, the first row holds
    the column names and the second a dashed rule

    :param statistics:
    :param columns: summary keys to show, in order
    :param separator:
    :return:
    """
    rows = list()
    for statistic in statistics:
        summary = statistic.summary()
        rows.append([str(summary[column]) for column in columns])

    widths = [
        max([len(column)] + [len(row[index]) for row in rows])
        for index, column in enumerate(columns)
    ]
    lines = [
        separator.join(column.ljust(width) for column, width in zip(columns, widths)).rstrip(),
        separator.replace(" ", "-").join("-" * width for width in widths),
    ]
    for row in rows:
        lines.append(separator.join(value.ljust(width) for value, width in zip(row, widths)).rstrip())
    return "\n".join(lines)


def report(statistics, stream=None):
    if stream is None:
        stream = sys.stdout
    stream.write(summary_table(statistics) + "\n")
    stream.flush()
