from enterprise_core.tools.kpi_tools import get_kpi_tools, kpi_growth_calc

__all__ = ["get_kpi_tools", "kpi_growth_calc"]
