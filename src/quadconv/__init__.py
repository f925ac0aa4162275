'''
Author: leviathan 670916484@qq.com
Date: 2025-11-20 10:05:11
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 16:55:02
FilePath: /quadconv/src/quadconv/__init__.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# src/quadconv/__init__.py

from .grid import Grid1D, gen_uniform_grid, refined_count
from .integrand import Integrand, SINE
from .field import SampledFunction1D
from .sampler import FunctionSampler

# 求积公式 / 窗口规则
from .stencil import QuadratureRule, QuadratureStencil1D, RULES, STENCILS
from .quadrature import calculate_numerical_integrals, integrate
from .errors import calculate_errors

# 配置 + 流程 + 打印
from .config import TaskConfig
from .study import ConvergenceStudy, ConvergenceResult, Resolution
from .report import format_error_table, print_error_table


__all__ = [
    # 网格 / 采样
    "Grid1D",
    "gen_uniform_grid",
    "refined_count",
    "Integrand",
    "SINE",
    "SampledFunction1D",
    "FunctionSampler",

    # 求积
    "QuadratureRule",
    "QuadratureStencil1D",
    "RULES",
    "STENCILS",
    "calculate_numerical_integrals",
    "integrate",
    "calculate_errors",

    # 流程
    "TaskConfig",
    "ConvergenceStudy",
    "ConvergenceResult",
    "Resolution",
    "format_error_table",
    "print_error_table",
]
