import logging
import re
from typing import override

from rich.logging import RichHandler

# Simple color theme for Rich
COLOR = {
    "eliminated": "bold red",
    "survivor": "bold green",
    "person": "yellow",
    "warning": "bold red",
    "prefix": "dim",
}

PERSON_PATTERN = re.compile(r"\bperson (\d+)\b")


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        engine_id = getattr(record, "engine_id", 0)
        count = getattr(record, "count", "_")
        crossed_out = getattr(record, "crossed_out", "_")
        round_ = getattr(record, "round", 0)
        prefix = f"{engine_id}:{count}/{crossed_out} {round_}"

        styled = record.getMessage()

        styled = re.sub(
            r"\bEliminated\b",
            f"[{COLOR['eliminated']}]Eliminated[/{COLOR['eliminated']}]",
            styled,
        )
        styled = re.sub(
            r"\bSurvivor\b",
            f"[{COLOR['survivor']}]Survivor[/{COLOR['survivor']}]",
            styled,
        )
        styled = PERSON_PATTERN.sub(
            rf"person [{COLOR['person']}]\1[/{COLOR['person']}]", styled
        )

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
