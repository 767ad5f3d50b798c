# encoding: utf-8
"""
@author:  Ryuk
@contact: jeryuklau@gmail.com
"""

__version__ = "0.1.0"
