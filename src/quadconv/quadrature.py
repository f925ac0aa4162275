'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 10:36:08
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 15:20:31
FilePath: /quadconv/src/quadconv/quadrature.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# quadconv/quadrature.py
from typing import Optional, Sequence

import numpy as np

from .field import SampledFunction1D
from .log import get_module_logger
from .stencil import RULES, STENCILS, QuadratureStencil1D

logger = get_module_logger(__name__)

# 最宽的 stencil（Newton–Cotes）需要 5 个点
MIN_NODES = max(s.width for s in STENCILS.values())


def calculate_numerical_integrals(
    func: Optional[np.ndarray],
    count_nodes: int,
    step: float,
) -> np.ndarray:
    """
    一遍扫描数组，同时累加 5 条公式。
    返回长度为 5 的数组，顺序见 stencil.RULES。
    """
    if func is None:
        raise ValueError("sampled function array is required")
    if count_nodes < MIN_NODES:
        raise ValueError(f"quadrature requires count_nodes >= {MIN_NODES}, got {count_nodes}")
    values = np.asarray(func, dtype=float)
    if values.shape != (count_nodes,):
        raise ValueError(f"shape mismatch: {values.shape} != {(count_nodes,)}")
    if not step > 0.0:
        raise ValueError(f"step must be positive, got {step!r}")

    stencils: Sequence[QuadratureStencil1D] = [STENCILS[rule] for rule in RULES]
    methods = np.zeros(len(stencils), dtype=float)

    # 按下标递增累加，保证两次网格上的结果可复现
    for i in range(count_nodes):
        for slot, stencil in enumerate(stencils):
            if stencil.opens_at(i, count_nodes):
                methods[slot] += stencil.contribution(values, i, step)

    logger.debug("integrals on %d nodes (step=%r): %s", count_nodes, step, methods)
    return methods


def integrate(sampled: SampledFunction1D) -> np.ndarray:
    """SampledFunction1D 版本：节点数和步长直接取自它的网格."""
    return calculate_numerical_integrals(sampled.values, sampled.count_nodes, sampled.step)
