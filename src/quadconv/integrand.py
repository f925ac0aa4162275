'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:30:02
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 09:47:55
FilePath: /quadconv/src/quadconv/integrand.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from dataclasses import dataclass
from typing import Callable, TypeAlias

import numpy as np

UnaryFn: TypeAlias = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class Integrand:
    """
    被积函数和它的原函数，必须配对使用：
        d/dx antiderivative(x) == func(x)
    func / antiderivative 都要能接受 numpy 数组（逐点计算）。
    """
    name: str
    func: UnaryFn
    antiderivative: UnaryFn

    def __call__(self, x):
        return self.func(x)

    def definite(self, a: float, b: float) -> float:
        """解析积分 F(b) - F(a)."""
        return float(self.antiderivative(b) - self.antiderivative(a))


def _neg_cos(x):
    return -np.cos(x)


SINE = Integrand(name="sin", func=np.sin, antiderivative=_neg_cos)
