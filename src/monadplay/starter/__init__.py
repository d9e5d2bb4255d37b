from .config import DemoConfig
from .demo import DemoReport, double_unit, main, run_demo, square_unit
from .formatter import format_report
from .identities import IdentityCheck, check_identities

__all__ = [
    "DemoConfig",
    "DemoReport",
    "IdentityCheck",
    "check_identities",
    "format_report",
    "run_demo",
    "main",
    "square_unit",
    "double_unit",
]
