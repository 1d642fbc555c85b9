"""
参数转换层
将宿主传入的数值转换为 IEEE-754 双精度浮点数，再调用增长率计算
"""

from decimal import Decimal
from numbers import Real
from typing import Any

from enterprise_core.growth import calculate_kpi_growth


class KpiArgumentError(TypeError):
    """参数无法转换为双精度浮点数"""


def to_double(value: Any, name: str = "value") -> float:
    """
    将宿主数值转换为 float

    Args:
        value: 宿主传入的数值（float、int、Decimal、Fraction 等实数）
        name: 参数名称，用于错误信息

    Returns:
        对应的 float，NaN、±inf、-0.0 原样保留

    Raises:
        KpiArgumentError: 非实数类型，或整数超出双精度范围
    """
    if type(value) is float:
        return value
    if isinstance(value, float):
        # numpy.float64 等子类，转换后数值逐位不变
        return float(value)

    # bool 是 int 的子类，但不是数值参数
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise KpiArgumentError(f"{name} 必须是数值类型，实际为 {type(value).__name__}")

    try:
        result = float(value)
    except OverflowError:
        # 超大整数或分数；Decimal 溢出时按 IEEE-754 得到 ±inf，不会走到这里
        raise KpiArgumentError(f"{name} 超出双精度浮点数范围") from None
    except ValueError as e:
        # Decimal('sNaN') 无法转换
        raise KpiArgumentError(f"{name} 无法转换为双精度浮点数: {e}") from None

    return result


def call_kpi_growth(current: Any, previous: Any) -> float:
    """
    转换参数后计算增长率

    Args:
        current: 当前期数值
        previous: 上期数值

    Returns:
        增长率（百分比）
    """
    return calculate_kpi_growth(
        to_double(current, "current"),
        to_double(previous, "previous"),
    )
