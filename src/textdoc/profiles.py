from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from .clean import DEFAULT_TIME_MASK


EMPTY_AVERAGE_POLICIES = ("raise", "zero", "nan")


@dataclass(frozen=True)
class DocumentProfile:
    name: str = "default"

    # what average_word_length does when there are no words
    empty_average: str = "raise"

    # clone() copies writable/read_only as well as the text fields
    clone_flags: bool = True

    # replacement for redacted clock times
    time_mask: str = DEFAULT_TIME_MASK

    def __post_init__(self) -> None:
        if self.empty_average not in EMPTY_AVERAGE_POLICIES:
            raise ValueError(
                f"Unknown empty_average policy: {self.empty_average!r} "
                f"(expected one of {', '.join(EMPTY_AVERAGE_POLICIES)})"
            )


def profile_from_cfg(cfg: dict | None) -> DocumentProfile:
    # allow empty cfg
    cfg = cfg or {}
    return DocumentProfile(
        name=str(cfg.get("name", "default")),
        empty_average=str(cfg.get("empty_average", "raise")).lower(),
        clone_flags=bool(cfg.get("clone_flags", True)),
        time_mask=str(cfg.get("time_mask", DEFAULT_TIME_MASK)),
    )


def load_profile(path: Path | str) -> DocumentProfile:
    """Build a profile from a YAML mapping. An empty file gives the defaults."""
    cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if cfg is not None and not isinstance(cfg, dict):
        raise ValueError(f"Profile file {path} must contain a mapping, got {type(cfg).__name__}")
    return profile_from_cfg(cfg)
