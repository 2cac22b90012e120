"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from alignclock.i18n import LANGS


@dataclass(frozen=True)
class Settings:
    lang: str = "en"
    log_level: str = "WARNING"
    output_dir: Path = Path("results")
    svg_width: int = 800
    svg_height: int = 300


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from ALIGNCLOCK_* environment variables.

    Args:
        dotenv: Load a .env file from the working directory first. Values
            already in the environment win.

    Raises:
        ValueError: If an SVG dimension is not a positive integer.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    lang = os.environ.get("ALIGNCLOCK_LANG", "en").lower()
    if lang not in LANGS:
        lang = "en"

    return Settings(
        lang=lang,
        log_level=os.environ.get("ALIGNCLOCK_LOG_LEVEL", "WARNING").upper(),
        output_dir=Path(os.environ.get("ALIGNCLOCK_OUTPUT_DIR") or "results"),
        svg_width=_positive_int("ALIGNCLOCK_SVG_WIDTH", 800),
        svg_height=_positive_int("ALIGNCLOCK_SVG_HEIGHT", 300),
    )
