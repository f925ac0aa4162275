'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:12:41
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 15:03:18
FilePath: /quadconv/src/quadconv/grid.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass

import numpy as np

EPS = float(np.finfo(float).eps)


def check_interval(a: float, b: float, eps: float = EPS) -> None:
    """区间必须满足 a < b 且 |b - a| > eps。"""
    if not a < b:
        raise ValueError(f"interval requires a < b, got a={a!r}, b={b!r}")
    if abs(b - a) <= eps:
        raise ValueError(f"interval [{a!r}, {b!r}] is degenerate (|b-a| <= {eps!r})")


def gen_uniform_grid(step: float, count_nodes: int, a: float, b: float) -> np.ndarray:
    """
    均匀网格：x[i] = a + step * i，i = 0 .. count_nodes-1。
    最后一个点强制等于 b，避免浮点累积误差。
    """
    if count_nodes < 2:
        raise ValueError(f"uniform grid requires count_nodes >= 2, got {count_nodes}")
    check_interval(a, b)

    x = a + step * np.arange(count_nodes, dtype=float)
    x[-1] = b
    return x


@dataclass(frozen=True)
class Grid1D:
    """
    一维均匀网格 [a, b]。
    count_nodes: 网格点数量（包含两端点）
    step: 网格步长
    """
    step: float
    count_nodes: int
    a: float
    b: float

    def __post_init__(self) -> None:
        if self.count_nodes < 2:
            raise ValueError(f"Grid1D requires count_nodes >= 2, got {self.count_nodes}")
        check_interval(self.a, self.b)
        if not self.step > 0.0:
            raise ValueError(f"Grid1D requires step > 0, got {self.step!r}")
        # 均匀网格：step * (count_nodes - 1) 必须正好铺满 [a, b]
        if not np.isclose(self.step * (self.count_nodes - 1), self.b - self.a, rtol=1e-9, atol=0.0):
            raise ValueError(
                f"step={self.step!r} with count_nodes={self.count_nodes} does not span "
                f"[{self.a!r}, {self.b!r}]"
            )

    @classmethod
    def uniform(cls, a: float, b: float, count_nodes: int) -> "Grid1D":
        """按节点数推出步长：step = |b - a| / (count_nodes - 1)."""
        if count_nodes < 2:
            raise ValueError(f"Grid1D requires count_nodes >= 2, got {count_nodes}")
        return cls(step=abs(b - a) / (count_nodes - 1), count_nodes=count_nodes, a=a, b=b)

    @property
    def x(self) -> np.ndarray:
        """网格点坐标（只读）."""
        x = gen_uniform_grid(self.step, self.count_nodes, self.a, self.b)
        x.flags.writeable = False
        return x

    def refined(self, ratio: int) -> "Grid1D":
        """每个粗网格区间插入 ratio-1 个新点，端点保持不变。"""
        if ratio < 1:
            raise ValueError(f"refinement ratio must be >= 1, got {ratio}")
        return Grid1D(
            step=self.step / ratio,
            count_nodes=refined_count(self.count_nodes, ratio),
            a=self.a,
            b=self.b,
        )


def refined_count(count_nodes: int, ratio: int) -> int:
    """
    n 个节点 -> n-1 个区间，每个区间切成 ratio 份：
        (n - 1) * ratio + 1
    ratio = 2 时就是 2n - 1。
    """
    return (count_nodes - 1) * ratio + 1
