from typing import Optional

import numpy as np


class Window:
    def __init__(self, begin: int, length: int, size: int):
        self.begin = begin
        self.length = length
        self.size = size
        self.validate()

    def __len__(self):
        return self.length

    @property
    def end(self):
        return self.begin + self.length

    def validate(self):
        """
        Checks that [begin, begin + length) lies inside an array of the given size, the slice is allowed to be
        empty, but neither begin nor length can be negative

        :return:
        """
        if self.begin < 0:
            raise ValueError("Start Position Can't Be Negative, Given {}".format(self.begin))
        if self.length < 0:
            raise ValueError("Length Can't Be Negative, Given {}".format(self.length))
        if self.begin + self.length > self.size:
            raise ValueError(
                "Window Can't Exceed Array, Given begin {} and length {},"
                " Expected begin + length <= {}".format(self.begin, self.length, self.size)
            )

    def slice_of(self, values) -> np.ndarray:
        return np.asarray(values[self.begin : self.end], dtype=np.float64)

    @classmethod
    def get_window(cls, values, begin: int = 0, length: Optional[int] = None):
        """
        :param values: input array
        :param begin: first element to include
        :param length: number of elements to include, None for everything from begin onwards
        :return:
        """
        if values is None:
            raise ValueError("Input Array Can't Be None")
        size = len(values)
        if length is None:
            length = size - begin
        return Window(begin, length, size)
