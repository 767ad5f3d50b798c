'''
Author: Ryuk
Date: 2026-03-02 10:05:12
LastEditors: Ryuk
LastEditTime: 2026-03-08 17:26:44
Description: First create
'''

from .errors import InsufficientDataError, InvalidParameterError, NumericDegeneracyWarning
