"""
enterprise-core
KPI 增长率计算核心
"""

from enterprise_core.binding import KpiArgumentError, call_kpi_growth, to_double
from enterprise_core.growth import calculate_kpi_growth

__version__ = "0.1.0"

__all__ = [
    "KpiArgumentError",
    "calculate_kpi_growth",
    "call_kpi_growth",
    "to_double",
]
