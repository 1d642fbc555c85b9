"""
KPI 计算工具
将增长率计算封装为 Agent 可调用的工具
"""

import logging
from typing import Annotated, List, Optional

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, BeforeValidator, Field, ValidationInfo

from enterprise_core.binding import to_double
from enterprise_core.config import get_decimals, get_default_period
from enterprise_core.growth import calculate_kpi_growth

logger = logging.getLogger(__name__)


def _marshal_field(value, info: ValidationInfo) -> float:
    # 在 pydantic 宽松转换之前执行，True、"150" 等直接抛 KpiArgumentError
    return to_double(value, info.field_name)


HostNumber = Annotated[float, BeforeValidator(_marshal_field)]


class KpiGrowthInput(BaseModel):
    """kpi_growth_calc 工具参数"""
    current_value: HostNumber = Field(description="当前期数值")
    previous_value: HostNumber = Field(description="上期数值")
    period: Optional[str] = Field(default=None, description="计算周期")


def kpi_growth_calc(current_value: float, previous_value: float, period: Optional[str] = None) -> dict:
    """
    计算 KPI 增长率

    Args:
        current_value: 当前期数值
        previous_value: 上期数值
        period: 计算周期（默认读取 KPI_GROWTH_PERIOD，未设置时为"年度"）

    Returns:
        包含增长率计算结果的字典
    """
    current_value = to_double(current_value, "current_value")
    previous_value = to_double(previous_value, "previous_value")
    if period is None:
        period = get_default_period()
    decimals = get_decimals()

    growth_rate = calculate_kpi_growth(current_value, previous_value)
    baseline_zero = previous_value == 0.0
    percentage = f"{growth_rate:.{decimals}f}%"

    if baseline_zero:
        logger.info(f"上期数值为0，{period}增长率按 0 处理 (current_value={current_value})")
        calculation = f"上期数值为0，无法作为基数，按无增长处理 = {percentage}"
    else:
        calculation = f"(({current_value} - {previous_value}) / {previous_value}) × 100 = {percentage}"

    logger.debug(f"KPI 增长率计算: {calculation}")

    return {
        "current_value": current_value,
        "previous_value": previous_value,
        "growth_rate": round(growth_rate, decimals),
        "growth_rate_percentage": percentage,
        "period": period,
        "calculation": calculation,
        "baseline_zero": baseline_zero,
    }


def get_kpi_tools() -> List[StructuredTool]:
    """
    创建 KPI 计算工具列表，可直接传给 llm.bind_tools

    Returns:
        StructuredTool 列表
    """
    growth_tool = StructuredTool.from_function(
        func=kpi_growth_calc,
        name="kpi_growth_calc",
        description=(
            "计算 KPI 增长率。参数：current_value(当前值), previous_value(上期值), "
            f"period(周期，可选，默认'{get_default_period()}')。上期值为0时增长率记为0"
        ),
        args_schema=KpiGrowthInput,
    )
    return [growth_tool]
