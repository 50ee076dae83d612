"""
Reporting utilities (plain text) for containership.
"""

from containership_app.reports.simple_text_report import build_ship_info_text

__all__ = [
    "build_ship_info_text",
]
