"""
性能对比脚本
运行 enterprise_core 与内联实现的调用开销对比并打印结果表
"""

import argparse
import logging
import sys
from pathlib import Path

# 添加项目根目录到 Python 路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from enterprise_core.benchmark import run_benchmark

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="KPI 增长率计算性能对比")
    parser.add_argument("--rounds", type=int, default=5, help="计时轮数")
    parser.add_argument("--number", type=int, default=100_000, help="每轮调用次数")
    args = parser.parse_args()

    logger.info(f"开始性能对比: rounds={args.rounds}, number={args.number}")
    rows = run_benchmark(rounds=args.rounds, number=args.number)

    print(f"{'实现':<40}{'ops/sec':>16}{'ns/op':>12}")
    for row in rows:
        print(f"{row['name']:<40}{row['ops_per_sec']:>16,.0f}{row['mean_ns']:>12.1f}")


if __name__ == "__main__":
    main()
