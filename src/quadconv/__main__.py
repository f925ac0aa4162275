'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 16:25:30
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-23 10:20:44
FilePath: /quadconv/src/quadconv/__main__.py
Description: python -m quadconv

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
import os

from .config import TaskConfig
from .log import config_logging
from .report import print_error_table
from .study import ConvergenceStudy


def main() -> int:
    config_logging(os.environ.get("QUADCONV_VERBOSE", "") not in ("", "0"))

    study = ConvergenceStudy(config=TaskConfig.from_env())
    result = study.run()

    print(f"Analytic integral: {result.analytic:.12f}")
    print_error_table(result.coarse.errors, result.fine.errors)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
