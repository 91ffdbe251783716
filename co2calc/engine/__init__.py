from .calculator import CalculationEngine
from .comparison import compare_scenarios, run_batch, sales_summary

__all__ = [
    "CalculationEngine",
    "compare_scenarios",
    "run_batch",
    "sales_summary",
]
