'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 14:02:45
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 10:18:27
FilePath: /quadconv/src/quadconv/config.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
# quadconv/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .grid import check_interval


@dataclass(frozen=True)
class TaskConfig:
    """
    可编辑参数：区间 [a, b]、网格节点数 k。
    步长 h 和 h/2 由它们推出，不单独配置。
    """
    a: float = -5.5312
    b: float = 3.32
    k: int = 39

    def __post_init__(self) -> None:
        check_interval(self.a, self.b)
        if self.k < 2:
            raise ValueError(f"TaskConfig requires k >= 2, got {self.k}")

    @property
    def h(self) -> float:
        return abs(self.b - self.a) / (self.k - 1)

    @property
    def h_half(self) -> float:
        return self.h / 2

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TaskConfig":
        """
        环境变量覆盖默认值：
          QUADCONV_A / QUADCONV_B / QUADCONV_K
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            a=float(env.get("QUADCONV_A", defaults.a)),
            b=float(env.get("QUADCONV_B", defaults.b)),
            k=int(env.get("QUADCONV_K", defaults.k)),
        )
