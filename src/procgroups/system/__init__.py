"""
System interaction utilities for the procgroups package.

This module reads process attributes from the operating system.
"""

from .processes import get_process_attributes, iter_process_attributes

__all__ = [
    "get_process_attributes",
    "iter_process_attributes",
]
