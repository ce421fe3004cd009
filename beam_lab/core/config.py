# beam_lab/core/config.py
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidArgumentError

MIN_BEAM_WIDTH = 1
DEFAULT_BEAM_WIDTH: Optional[int] = None   # unbounded -> exact A*

# ---- Tunables (overridable via environment variables) -----------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
BENCH_NODES = int(os.getenv("BENCH_NODES", "250000"))
BENCH_ARCS = int(os.getenv("BENCH_ARCS", "1500000"))
BENCH_BEAM_WIDTH = int(os.getenv("BENCH_BEAM_WIDTH", "4"))
BENCH_SEED = os.getenv("BENCH_SEED")  # unset -> fresh seed per run


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "" or raw.strip().lower() in ("none", "inf"):
        return None
    return int(raw)


@dataclass(frozen=True)
class BeamConfig:
    """
    Per-call search settings.

    beam_width: max successors kept per expansion; < 1 clamps to 1, None or inf = unbounded.
    max_expansions: abort with SearchLimitError after this many expansions (None = no cap).
    """
    beam_width: Optional[int] = DEFAULT_BEAM_WIDTH
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        width = self.beam_width
        if width is None:
            return
        if isinstance(width, float) and not math.isfinite(width):
            if math.isnan(width):
                raise InvalidArgumentError(f"The beam width must be a number, got {width!r}.")
            # inf means no pruning, -inf clamps like any other width below 1
            object.__setattr__(self, "beam_width", None if width > 0 else MIN_BEAM_WIDTH)
            return
        object.__setattr__(self, "beam_width", max(int(width), MIN_BEAM_WIDTH))

    @classmethod
    def coerce(cls, config: Union["BeamConfig", int, None]) -> "BeamConfig":
        if config is None:
            return cls()
        if isinstance(config, BeamConfig):
            return config
        return cls(beam_width=config)

    @classmethod
    def from_env(cls) -> "BeamConfig":
        return cls(
            beam_width=_optional_int(os.getenv("BEAM_WIDTH")),
            max_expansions=_optional_int(os.getenv("MAX_EXPANSIONS")),
        )

    @property
    def unbounded(self) -> bool:
        return self.beam_width is None


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for command-line entry points. Library code never calls this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
