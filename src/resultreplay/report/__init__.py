from .loader import FormatError, load_report
from .models import FAILURE, IGNORED, SUCCESS, Case, Report, Suite

__all__ = [
    "FAILURE",
    "IGNORED",
    "SUCCESS",
    "Case",
    "FormatError",
    "Report",
    "Suite",
    "load_report",
]
