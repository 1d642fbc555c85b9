"""
配置模块
从项目根目录的 .env 文件和环境变量读取工具层的显示配置
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# 自动寻找当前文件所在目录的父目录下的 .env
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

DEFAULT_DECIMALS = 2
DEFAULT_PERIOD = "年度"
MAX_DECIMALS = 10


def get_decimals() -> int:
    """
    读取增长率显示保留的小数位数

    Returns:
        KPI_GROWTH_DECIMALS 的值，未设置时为 2

    Raises:
        ValueError: 不是 0 到 10 之间的整数
    """
    raw = os.getenv("KPI_GROWTH_DECIMALS")
    if raw is None or not raw.strip():
        return DEFAULT_DECIMALS

    try:
        decimals = int(raw.strip())
    except ValueError:
        raise ValueError(f"KPI_GROWTH_DECIMALS 必须是整数，当前值: {raw!r}") from None

    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"KPI_GROWTH_DECIMALS 必须在 0 到 {MAX_DECIMALS} 之间，当前值: {decimals}")

    return decimals


def get_default_period() -> str:
    """读取默认计算周期"""
    period = os.getenv("KPI_GROWTH_PERIOD", "").strip()
    return period or DEFAULT_PERIOD
