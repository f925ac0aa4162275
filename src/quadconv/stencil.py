'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 09:58:33
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 15:12:47
FilePath: /quadconv/src/quadconv/stencil.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# quadconv/stencil.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import numpy as np


class QuadratureRule(Enum):
    RECTANGLES = "Rectangles"
    TRAPEZE = "Trapeze"
    SIMPSON = "Simpson"
    NEWTON_COTES = "NewtonCotes"
    GAUSS = "Gauss"

    @property
    def label(self) -> str:
        return self.value


# 估计值 / 误差向量的槽位顺序，打印表格按下标取
RULES: Tuple[QuadratureRule, ...] = (
    QuadratureRule.RECTANGLES,
    QuadratureRule.TRAPEZE,
    QuadratureRule.SIMPSON,
    QuadratureRule.NEWTON_COTES,
    QuadratureRule.GAUSS,
)


@dataclass(frozen=True)
class QuadratureStencil1D:
    """
    一条求积公式 = 宽度为 width 的 stencil，在均匀网格上首尾相接地铺开：
        contribution(i) = (numerator * step / denominator) * sum_k coeffs[k] * f[i + k]
    coeffs 是整数，外层缩放单独算，和公式表的写法一致，
    比如 Simpson 就是 (step/3) * (f0 + 4 f1 + f2)。
    相邻两个 stencil 共用一个端点，所以起点间隔是 width - 1。
    stencil 从 i 开始当且仅当：
        i % (width - 1) == 0  且  i + width - 1 <= count_nodes - 1
    """
    rule: QuadratureRule
    coeffs: Tuple[int, ...]
    numerator: int = 1
    denominator: int = 1

    @property
    def width(self) -> int:
        return len(self.coeffs)

    @property
    def stride(self) -> int:
        return self.width - 1

    @property
    def weights(self) -> Tuple[float, ...]:
        """展开后的权重（乘以 step 之前）."""
        return tuple(c * self.numerator / self.denominator for c in self.coeffs)

    def opens_at(self, i: int, count_nodes: int) -> bool:
        return i % self.stride == 0 and i + self.width <= count_nodes

    def starts(self, count_nodes: int) -> range:
        """所有 stencil 起点（递增）."""
        return range(0, count_nodes - self.width + 1, self.stride)

    def contribution(self, values: np.ndarray, i: int, step: float) -> float:
        acc = 0.0
        for k, c in enumerate(self.coeffs):
            if c:
                acc += c * values[i + k]
        return self.numerator * step / self.denominator * acc

    def apply(self, values: np.ndarray, step: float) -> float:
        """单独用这一条公式积分整条数组."""
        count_nodes = len(values)
        if count_nodes < self.width:
            raise ValueError(
                f"{self.rule.label} needs at least {self.width} nodes, got {count_nodes}"
            )
        total = 0.0
        for i in self.starts(count_nodes):
            total += self.contribution(values, i, step)
        return total


STENCILS: Dict[QuadratureRule, QuadratureStencil1D] = {
    # 中点矩形：3 点 stencil，只用中心点，2 * step * f[i+1]
    QuadratureRule.RECTANGLES: QuadratureStencil1D(
        QuadratureRule.RECTANGLES, (0, 1, 0), numerator=2
    ),
    QuadratureRule.TRAPEZE: QuadratureStencil1D(
        QuadratureRule.TRAPEZE, (1, 1), denominator=2
    ),
    QuadratureRule.SIMPSON: QuadratureStencil1D(
        QuadratureRule.SIMPSON, (1, 4, 1), denominator=3
    ),
    # Boole: 2h/45 * (7, 32, 12, 32, 7)
    QuadratureRule.NEWTON_COTES: QuadratureStencil1D(
        QuadratureRule.NEWTON_COTES, (7, 32, 12, 32, 7), numerator=2, denominator=45
    ),
    # 3 点 Gauss–Legendre 权重 (5/9, 8/9, 5/9)，取在网格点上
    QuadratureRule.GAUSS: QuadratureStencil1D(
        QuadratureRule.GAUSS, (5, 8, 5), denominator=9
    ),
}
