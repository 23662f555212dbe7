from .duration import format_duration

__all__ = ["format_duration"]
