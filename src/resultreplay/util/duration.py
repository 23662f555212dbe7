from __future__ import annotations


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_duration(seconds: float, full_words: bool = False) -> str:
    """Render elapsed seconds the way the console replay prints them.

    Sub-second values are shown as truncated milliseconds. Everything else is
    rounded to two decimals; with ``full_words`` the unit is spelled out and
    only a rounded value strictly above one is plural.
    """
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    rounded = round(seconds, 2)
    if not full_words:
        return f"{_trim(rounded)}s"
    unit = "seconds" if rounded > 1 else "second"
    return f"{_trim(rounded)} {unit}"
