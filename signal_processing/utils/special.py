'''
Author: Ryuk
Date: 2026-03-02 10:25:31
LastEditors: Ryuk
LastEditTime: 2026-03-04 21:03:55
Description: First create
'''

import numpy as np

from ..errors import InvalidParameterError

# 级数截断阶数：求和 n = 0..K，共 K+1 项
DEFAULT_TRUNCATION_ORDER = 100


def _check_b(b):
    if b <= 0 and float(b).is_integer():
        raise InvalidParameterError("b must not be a non-positive integer, got {}".format(b))


def hyp1f1_series(a, b, z, order=DEFAULT_TRUNCATION_ORDER):
    """
    Truncated Kummer series
        M(a, b, z) = sum_{n=0}^{order} (a)_n / (b)_n * z^n / n!

    Terms follow the recursion t_{n+1} = t_n * (a+n)/(b+n) * z/(n+1).
    Negative z makes the series alternate, prefer `hyp1f1` there.
    """
    _check_b(b)
    z = np.asarray(z, dtype=np.float64)
    term = np.ones_like(z)
    total = np.ones_like(z)
    for n in range(order):
        term = term * ((a + n) / (b + n)) * z / (n + 1)
        total = total + term
    return total


def hyp1f1(a, b, z, order=DEFAULT_TRUNCATION_ORDER):
    """
    Confluent hypergeometric function M(a, b, z), vectorised over z.

    For z < 0 Kummer's transformation M(a, b, z) = e^z * M(b-a, b, -z) is used,
    so the summed series only has positive terms when b-a > 0. This is the
    case for every argument the weighted-Euclidean gain produces (z = -v_k).

    参数:
        a, b (float): 参数, b 不能是非正整数
        z (array-like): 自变量
        order (int): 截断阶数
    返回:
        M (ndarray): 与 z 同形状
    """
    _check_b(b)
    z = np.asarray(z, dtype=np.float64)
    if a == 0:
        return np.ones_like(z)

    flat = z.reshape(-1)
    neg = flat < 0
    out = np.empty_like(flat)
    out[~neg] = hyp1f1_series(a, b, flat[~neg], order)
    out[neg] = np.exp(flat[neg]) * hyp1f1_series(b - a, b, -flat[neg], order)
    return out.reshape(z.shape)
