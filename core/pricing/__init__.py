"""
Price composition for configured products.
"""

from core.pricing.pricing import (
    build_line_item_description,
    compute_total_price,
    compute_unit_price,
    resolve_base_price,
)

__all__ = [
    "build_line_item_description",
    "compute_total_price",
    "compute_unit_price",
    "resolve_base_price",
]
