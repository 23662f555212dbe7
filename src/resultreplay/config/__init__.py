from .loader import load_options
from .models import ReplayOptions

__all__ = ["ReplayOptions", "load_options"]
