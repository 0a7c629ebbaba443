"""Menu text for BitBar/xbar-style menu-bar shells."""

from __future__ import annotations

from typing import Mapping

from .constants import BILLS_CONSOLE_URL, SERVICE_LABEL_WIDTH, TOTAL_LABEL
from .models import TimeWindow

SEPARATOR = "---"


def _format_charge(value) -> str:
    return "" if value is None else str(value)


def render_menu(window: TimeWindow, sums: Mapping[str, float], icon: str = "") -> str:
    """Render the status line, date range, per-service lines and console link."""
    status_line = f"${_format_charge(sums.get(TOTAL_LABEL))}"
    if icon:
        status_line = f"{status_line} | image={icon}"

    lines = [
        status_line,
        SEPARATOR,
        f"{window.start.date()} ~ {window.end.date()} | color=grey font=Menlo-Bold",
    ]
    lines.extend(
        f"{label.ljust(SERVICE_LABEL_WIDTH)} ${_format_charge(charge)} | color=grey font=Menlo"
        for label, charge in sums.items()
    )
    lines.append(SEPARATOR)
    lines.append(f"Open Bills | href={BILLS_CONSOLE_URL} font=Menlo")
    return "\n".join(lines) + "\n"
