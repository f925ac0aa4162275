'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:41:19
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 14:58:06
FilePath: /quadconv/src/quadconv/field.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
import numpy as np

from .grid import Grid1D


class SampledFunction1D:
    """
    Grid1D 上的函数采样值。内部就是一个只读的 1D numpy array，
    下标和 grid.x 一一对应。
    """

    def __init__(self, grid: Grid1D, values: np.ndarray) -> None:
        data = np.array(values, dtype=float)
        if data.shape != (grid.count_nodes,):
            raise ValueError(f"shape mismatch: {data.shape} != {(grid.count_nodes,)}")
        data.flags.writeable = False
        self.grid = grid
        self._data = data

    @property
    def values(self) -> np.ndarray:
        return self._data

    @property
    def count_nodes(self) -> int:
        return self.grid.count_nodes

    @property
    def step(self) -> float:
        return self.grid.step

    def __len__(self) -> int:
        return self.grid.count_nodes

    def __getitem__(self, index):
        return self._data[index]

    def __repr__(self) -> str:
        return f"SampledFunction1D(count_nodes={self.grid.count_nodes}, step={self.grid.step!r})"
