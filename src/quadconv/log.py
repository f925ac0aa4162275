'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 11:05:37
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 11:20:14
FilePath: /quadconv/src/quadconv/log.py
Description: 

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
import logging


def config_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARN)


def get_module_logger(name: str) -> logging.Logger:
    # 模块名本身就在 quadconv.* 下，继承 root logger 的设置
    return logging.getLogger(name)
