import copy
from typing import Optional

import numpy as np

from storeless_stats.window import Window


class InvalidStateError(RuntimeError):
    pass


class StorelessStatistic:
    """
    A statistic which can be updated one value at a time without keeping the values around, the batch
    counterpart `evaluate` works on a slice of an array and leaves the running state untouched

    Instances are not synchronized, If an instance is shared between threads and any of them calls
    `increment` or `clear`, the callers have to synchronize externally
    """

    def increment(self, value: float):
        raise NotImplementedError

    def get_result(self) -> float:
        raise NotImplementedError

    def get_n(self) -> int:
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError

    def evaluate(self, values, begin: int = 0, length: Optional[int] = None) -> float:
        raise NotImplementedError

    def increment_all(self, values, begin: int = 0, length: Optional[int] = None):
        """
        Adds every value of values[begin: begin + length], the slice is validated before anything is added

        :param values:
        :param begin:
        :param length:
        :return:
        """
        window = Window.get_window(values, begin, length)
        for value in window.slice_of(values):
            self.increment(value)

    def copy(self):
        return copy.deepcopy(self)

    def summary(self) -> dict:
        return {
            "statistic": self.__class__.__name__,
            "n": self.get_n(),
            "result": self.get_result(),
        }

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        if self.get_n() != other.get_n():
            return False
        result, other_result = self.get_result(), other.get_result()
        if np.isnan(result) and np.isnan(other_result):
            return True
        return result == other_result

    __hash__ = None


class SumOfLogs(StorelessStatistic):
    """
    Running sum of natural logarithms, No validation is done on the input, log(0) adds -inf and the log of a
    negative number adds NaN
    """

    def __init__(self):
        self._n = 0
        self._value = 0.0

    def increment(self, value: float):
        with np.errstate(divide="ignore", invalid="ignore"):
            self._value += float(np.log(np.float64(value)))
        self._n += 1

    def get_result(self) -> float:
        return self._value

    def get_n(self) -> int:
        return self._n

    def clear(self):
        self._n = 0
        self._value = 0.0

    def evaluate(self, values, begin: int = 0, length: Optional[int] = None) -> float:
        window = Window.get_window(values, begin, length)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.sum(np.log(window.slice_of(values))))


class GeometricMean(StorelessStatistic):
    """
    Geometric mean computed as exp(sum of logs / n), the sum of logs is delegated to a swappable strategy,
    Therefore

        * If any of the values is < 0, the result is NaN
        * If all values are non-negative and finite but at least one is 0, the result is 0
        * If both +inf and -inf are among the values, the result is NaN

    The strategy can only be replaced while no data has been added
    """

    def __init__(self, log_sum_strategy: Optional[StorelessStatistic] = None):
        if log_sum_strategy is None:
            log_sum_strategy = SumOfLogs()
        assert isinstance(log_sum_strategy, StorelessStatistic), (
            "Expected log_sum_strategy of type [StorelessStatistic], "
            "but received %s." % (type(log_sum_strategy),)
        )
        self._log_sum_strategy = log_sum_strategy

    def increment(self, value: float):
        self._log_sum_strategy.increment(value)

    def get_result(self) -> float:
        n = self.get_n()
        if n > 0:
            with np.errstate(over="ignore", invalid="ignore"):
                return float(np.exp(np.float64(self._log_sum_strategy.get_result()) / n))
        return float("nan")

    def get_n(self) -> int:
        return self._log_sum_strategy.get_n()

    def has_data(self) -> bool:
        return self.get_n() > 0

    def __eq__(self, other):
        equal = super().__eq__(other)
        if equal is NotImplemented or not equal:
            return equal
        return type(self._log_sum_strategy) is type(other._log_sum_strategy)

    __hash__ = None

    def clear(self):
        self._log_sum_strategy.clear()

    def evaluate(self, values, begin: int = 0, length: Optional[int] = None) -> float:
        """
        Geometric mean of values[begin: begin + length], the running state is not modified

        :param values: input array
        :param begin: first element to include
        :param length: number of elements to include, None for everything from begin onwards
        :return: the geometric mean, NaN if length is 0 or any of the values is negative
        """
        window = Window.get_window(values, begin, length)
        log_sum = self._log_sum_strategy.evaluate(values, window.begin, len(window))
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            return float(np.exp(np.float64(log_sum) / len(window)))

    @property
    def log_sum_strategy(self) -> StorelessStatistic:
        return self._log_sum_strategy

    @log_sum_strategy.setter
    def log_sum_strategy(self, value: StorelessStatistic):
        self.set_log_sum_strategy(value)

    def get_log_sum_strategy(self) -> StorelessStatistic:
        return self._log_sum_strategy

    def set_log_sum_strategy(self, log_sum_strategy: StorelessStatistic):
        """
        Replace the sum of logs implementation, has to be called before any value is added

        :param log_sum_strategy:
        :return:
        """
        if self.has_data():
            raise InvalidStateError(
                "Log Sum Strategy Must Be Configured Before Values Are Added, Given n = {}".format(
                    self.get_n()
                )
            )
        assert isinstance(log_sum_strategy, StorelessStatistic), (
            "Expected log_sum_strategy of type [StorelessStatistic], "
            "but received %s." % (type(log_sum_strategy),)
        )
        self._log_sum_strategy = log_sum_strategy


_SUPPORTED_STATISTICS = {
    "SumOfLogs": SumOfLogs,
    "GeometricMean": GeometricMean,
}


def sum_of_logs():
    return SumOfLogs()


def geometric_mean(log_sum_strategy=None):
    return GeometricMean(log_sum_strategy)


def look_up(statistic_name, **statistic_param):
    """
    Resolve a statistic by its class name, parameters which are themselves dicts with a "name" key are
    resolved the same way, e.g. {"log_sum_strategy": {"name": "SumOfLogs"}}

    :param statistic_name:
    :param statistic_param:
    :return:
    """
    if statistic_name not in _SUPPORTED_STATISTICS:
        raise Exception("UnSupported Statistic %s." % (statistic_name,))

    for key, value in statistic_param.items():
        if isinstance(value, dict) and "name" in value:
            statistic_param[key] = look_up(value["name"], **value.get("param", {}))
    return _SUPPORTED_STATISTICS[statistic_name](**statistic_param)


def generate_statistics(statistics_to_apply: list):
    statistics = list()
    for individual_statistic in statistics_to_apply:
        if "param" not in list(individual_statistic.keys()):
            statistic_param = {}
        else:
            statistic_param = dict(individual_statistic["param"])
        statistics.append(look_up(individual_statistic["name"], **statistic_param))
    return statistics
