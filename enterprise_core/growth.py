"""
KPI 增长率计算
纯函数实现，不做校验、不做舍入、不记录日志
"""


def calculate_kpi_growth(current: float, previous: float) -> float:
    """
    计算 KPI 增长率（百分比）

    Args:
        current: 当前期数值
        previous: 上期数值

    Returns:
        ((current - previous) / previous) * 100；上期数值为 0 时返回 0.0
    """
    # 无基线视为无增长（-0.0 == 0.0 同样命中）
    if previous == 0.0:
        return 0.0
    return ((current - previous) / previous) * 100.0
