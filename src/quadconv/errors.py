'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 11:32:16
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 11:40:59
FilePath: /quadconv/src/quadconv/errors.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
import numpy as np

from .stencil import RULES


def calculate_errors(analytical: float, methods: np.ndarray) -> np.ndarray:
    """
    相对误差：|analytical - methods[i]| / analytical。
    analytical == 0 时不做保护，numpy 会给出 inf / nan。
    """
    methods = np.asarray(methods, dtype=float)
    if methods.shape != (len(RULES),):
        raise ValueError(f"expected {len(RULES)} estimates, got shape {methods.shape}")
    return np.abs(analytical - methods) / np.float64(analytical)
