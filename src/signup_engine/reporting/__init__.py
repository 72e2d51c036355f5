from __future__ import annotations

from .data_models import AllocationMetrics
from .metrics import compute_allocation_metrics, compute_date_summary
from .reporter import Reporter

__all__ = [
    "Reporter",
    "AllocationMetrics",
    "compute_allocation_metrics",
    "compute_date_summary",
]
