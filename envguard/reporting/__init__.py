"""
Environment report rendering.
"""

from .report import render_report, build_rows, count_failures, mask_value, preview_value, HEADERS

__all__ = [
    'render_report',
    'build_rows',
    'count_failures',
    'mask_value',
    'preview_value',
    'HEADERS'
]
