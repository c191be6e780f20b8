from storeless_stats.compute import (
    InvalidStateError,
    StorelessStatistic,
    SumOfLogs,
    GeometricMean,
    sum_of_logs,
    geometric_mean,
    look_up,
    generate_statistics,
)
from storeless_stats.printer import summary_table, report
from storeless_stats.window import Window
