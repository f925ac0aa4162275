'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 16:10:48
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-22 17:31:05
FilePath: /quadconv/src/quadconv/report.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
from typing import List

import numpy as np

from .stencil import RULES


def format_error_table(errors_h: np.ndarray, errors_h_2: np.ndarray) -> str:
    """两列对照表：每行一条公式，列为 h 和 h/2 上的相对误差."""
    if len(errors_h) != len(RULES) or len(errors_h_2) != len(RULES):
        raise ValueError(f"error vectors must have {len(RULES)} slots")

    name_width = max(len(rule.label) for rule in RULES)
    lines: List[str] = []
    header = f"{'Method':<{name_width}} | {'error(h)':>14} | {'error(h/2)':>14}"
    lines.append(header)
    lines.append("-" * len(header))
    for slot, rule in enumerate(RULES):
        lines.append(
            f"{rule.label:<{name_width}} | {errors_h[slot]:>14.6e} | {errors_h_2[slot]:>14.6e}"
        )
    return "\n".join(lines)


def print_error_table(errors_h: np.ndarray, errors_h_2: np.ndarray) -> None:
    print(format_error_table(errors_h, errors_h_2))
