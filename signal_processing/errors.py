'''
Author: Ryuk
Date: 2026-03-02 10:12:40
LastEditors: Ryuk
LastEditTime: 2026-03-02 10:20:13
Description: First create
'''


class InvalidParameterError(ValueError):
    """
    参数非法（例如 p <= -2、帧长为奇数），在处理开始前抛出
    """


class InsufficientDataError(ValueError):
    """
    输入信号过短，不足以完成噪声初始化
    """


class NumericDegeneracyWarning(RuntimeWarning):
    """
    数值退化（增益出现 nan/inf 并被置零），可恢复，不中断处理
    """
