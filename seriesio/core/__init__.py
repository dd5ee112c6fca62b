"""
核心模块
"""

from .series import Series

__all__ = ['Series']
