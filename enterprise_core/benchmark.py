"""
性能对比
比较打包的增长率计算与内联基线实现的调用开销
"""

import logging
import timeit
from typing import Callable, Dict, List

from tqdm import tqdm

from enterprise_core.growth import calculate_kpi_growth

logger = logging.getLogger(__name__)

# 基准调用参数
SAMPLE_ARGS = (120.0, 100.0)


def inline_kpi_growth(current: float, previous: float) -> float:
    """内联基线实现"""
    if previous == 0:
        return 0
    return ((current - previous) / previous) * 100


def _time_function(func: Callable[[float, float], float], rounds: int, number: int, desc: str) -> List[float]:
    """返回每轮的单次调用耗时（秒）"""
    current, previous = SAMPLE_ARGS
    timings = []
    for _ in tqdm(range(rounds), desc=desc, leave=False):
        elapsed = timeit.timeit(lambda: func(current, previous), number=number)
        timings.append(elapsed / number)
    return timings


def run_benchmark(rounds: int = 5, number: int = 100_000) -> List[Dict]:
    """
    运行性能对比

    Args:
        rounds: 计时轮数
        number: 每轮调用次数

    Returns:
        每个实现一行：name、ops_per_sec、mean_ns
    """
    if rounds < 1 or number < 1:
        raise ValueError("rounds 和 number 必须大于 0")

    candidates = {
        "enterprise_core calculate_kpi_growth": calculate_kpi_growth,
        "inline calculate_kpi_growth": inline_kpi_growth,
    }

    rows = []
    for name, func in candidates.items():
        timings = _time_function(func, rounds, number, name)
        mean = sum(timings) / len(timings)
        rows.append({
            "name": name,
            "ops_per_sec": 1 / mean if mean > 0 else float("inf"),
            "mean_ns": mean * 1e9,
        })
        logger.info(f"{name}: {mean * 1e9:.1f} ns/op")

    return rows
