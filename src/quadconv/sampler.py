'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 14:22:50
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 16:40:12
FilePath: /quadconv/src/quadconv/sampler.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# quadconv/sampler.py
from typing import Optional, Tuple

import numpy as np

from .field import SampledFunction1D
from .grid import EPS, Grid1D, check_interval
from .integrand import Integrand, SINE
from .log import get_module_logger

logger = get_module_logger(__name__)


class FunctionSampler:
    """
    在均匀网格上对被积函数采样，并缓存解析积分。

    两种模式：
      - 冷启动：coarse 为 None，直接在 count_nodes_init 个点上算 f(x)
      - 加密：给定粗网格采样 coarse，粗网格的值原样搬到 ratio*i，
              只计算中间新插入的点
    解析积分按 (a, b) 缓存在实例上，a 或 b 变化超过 eps 才重算。
    """

    def __init__(self, integrand: Integrand = SINE, eps: float = EPS) -> None:
        self.integrand = integrand
        self.eps = eps
        self._bounds: Optional[Tuple[float, float]] = None
        self._analytic: Optional[float] = None

    # ------------------------------------------------------------------
    # 解析积分（带缓存）
    # ------------------------------------------------------------------
    def analytic_integral(self, a: float, b: float) -> float:
        check_interval(a, b, self.eps)
        if self._bounds is not None and self._analytic is not None:
            old_a, old_b = self._bounds
            if abs(old_a - a) <= self.eps and abs(old_b - b) <= self.eps:
                return self._analytic

        self._analytic = self.integrand.definite(a, b)
        self._bounds = (a, b)
        logger.debug("analytic integral of %s on [%r, %r] = %r",
                     self.integrand.name, a, b, self._analytic)
        return self._analytic

    def reset_cache(self) -> None:
        self._bounds = None
        self._analytic = None

    # ------------------------------------------------------------------
    # 采样 / 加密
    # ------------------------------------------------------------------
    def sample(
        self,
        count_nodes_init: int,
        a: float,
        b: float,
        coarse: Optional[SampledFunction1D] = None,
        ratio: int = 1,
    ) -> SampledFunction1D:
        if count_nodes_init < 2:
            raise ValueError(f"sampling requires count_nodes_init >= 2, got {count_nodes_init}")
        check_interval(a, b, self.eps)
        if ratio < 1:
            raise ValueError(f"refinement ratio must be >= 1, got {ratio}")
        if ratio != 1 and coarse is None:
            raise ValueError(f"ratio={ratio} requires a coarse sampled array to refine")
        if coarse is not None and len(coarse) != count_nodes_init:
            raise ValueError(
                f"coarse array has {len(coarse)} nodes, expected count_nodes_init={count_nodes_init}"
            )
        if coarse is not None and (
            abs(coarse.grid.a - a) > self.eps or abs(coarse.grid.b - b) > self.eps
        ):
            raise ValueError(
                f"coarse array covers [{coarse.grid.a!r}, {coarse.grid.b!r}], "
                f"expected [{a!r}, {b!r}]"
            )

        if coarse is None:
            return self._sample_cold(count_nodes_init, a, b)
        return self._sample_refined(coarse, count_nodes_init, ratio)

    def refine(self, coarse: SampledFunction1D, ratio: int = 2) -> SampledFunction1D:
        grid = coarse.grid
        return self.sample(grid.count_nodes, grid.a, grid.b, coarse=coarse, ratio=ratio)

    def _sample_cold(self, count_nodes: int, a: float, b: float) -> SampledFunction1D:
        grid = Grid1D.uniform(a, b, count_nodes)
        values = self.integrand(grid.x)
        logger.debug("sampled %s on %d nodes, step=%r", self.integrand.name, count_nodes, grid.step)
        return SampledFunction1D(grid, values)

    def _sample_refined(
        self,
        coarse: SampledFunction1D,
        count_nodes_init: int,
        ratio: int,
    ) -> SampledFunction1D:
        grid = coarse.grid.refined(ratio)
        count_nodes_out = grid.count_nodes
        x = grid.x
        old = coarse.values

        out = np.empty(count_nodes_out, dtype=float)
        # 粗网格节点 i 落在细网格 ratio*i 上，原样拷贝
        out[::ratio] = old
        # 端点直接拷贝，不重新计算
        out[-1] = old[-1]

        # 其余 ratio*i + k (0 < k < ratio) 都是新点，一次性算 f(x)
        new = np.arange(count_nodes_out) % ratio != 0
        new[-1] = False
        if new.any():
            out[new] = self.integrand(x[new])

        logger.debug("refined %d -> %d nodes (ratio=%d), %d new evaluations",
                     count_nodes_init, count_nodes_out, ratio, int(new.sum()))
        return SampledFunction1D(grid, out)
