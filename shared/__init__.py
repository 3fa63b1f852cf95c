"""
Warden Shared Module
====================

Configuration, logging, console and finding models shared by the Warden
password analysis toolkit.
"""

from shared.config import WardenConfig

__all__ = ["WardenConfig"]
