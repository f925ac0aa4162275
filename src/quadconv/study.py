'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 15:27:13
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 16:52:09
FilePath: /quadconv/src/quadconv/study.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# quadconv/study.py
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .config import TaskConfig
from .errors import calculate_errors
from .field import SampledFunction1D
from .log import get_module_logger
from .quadrature import integrate
from .sampler import FunctionSampler

logger = get_module_logger(__name__)


@dataclass
class Resolution:
    """一种网格分辨率上的结果."""
    sampled: SampledFunction1D
    integrals: np.ndarray
    errors: np.ndarray

    @property
    def step(self) -> float:
        return self.sampled.step

    @property
    def count_nodes(self) -> int:
        return self.sampled.count_nodes


@dataclass
class ConvergenceResult:
    analytic: float
    coarse: Resolution
    fine: Resolution

    def improved(self) -> np.ndarray:
        """每条公式在 h/2 上的误差是否严格小于 h 上的."""
        return self.fine.errors < self.coarse.errors


@dataclass
class ConvergenceStudy:
    """
    h 网格 -> 积分/误差 -> 加密到 h/2 -> 积分/误差。
    细网格复用粗网格的函数值，只算新插入的点。
    """
    config: TaskConfig = field(default_factory=TaskConfig)
    sampler: FunctionSampler = field(default_factory=FunctionSampler)
    ratio: int = 2

    _result: Optional[ConvergenceResult] = None

    def run(self) -> ConvergenceResult:
        cfg = self.config
        analytic = self.sampler.analytic_integral(cfg.a, cfg.b)

        # 1) 步长 h
        coarse = self.sampler.sample(cfg.k, cfg.a, cfg.b)
        coarse_res = self._evaluate(analytic, coarse)

        # 2) 加密到 h / ratio
        fine = self.sampler.refine(coarse, self.ratio)
        fine_res = self._evaluate(analytic, fine)

        self._result = ConvergenceResult(analytic=analytic, coarse=coarse_res, fine=fine_res)
        logger.info("analytic=%r, errors(h)=%s, errors(h/%d)=%s",
                    analytic, coarse_res.errors, self.ratio, fine_res.errors)
        return self._result

    @property
    def result(self) -> ConvergenceResult:
        if self._result is None:
            return self.run()
        return self._result

    @staticmethod
    def _evaluate(analytic: float, sampled: SampledFunction1D) -> Resolution:
        integrals = integrate(sampled)
        errors = calculate_errors(analytic, integrals)
        return Resolution(sampled=sampled, integrals=integrals, errors=errors)
