"""Output format capability probes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Protocol

from PIL import features


class FormatCapability(Protocol):
    def supports_modern_format(self) -> bool:
        ...


@dataclass(frozen=True)
class StaticFormatCapability:
    supported: bool

    def supports_modern_format(self) -> bool:
        return self.supported


@dataclass(frozen=True)
class AcceptHeaderCapability:
    """Negotiated from the consuming client's HTTP ``Accept`` header."""

    accept: str

    def supports_modern_format(self) -> bool:
        for part in (self.accept or "").split(","):
            media_type, _, params = part.strip().partition(";")
            if media_type.strip().lower() != "image/webp":
                continue
            for param in params.split(";"):
                name, _, value = param.strip().partition("=")
                if name.strip().lower() == "q":
                    try:
                        return float(value) > 0
                    except ValueError:
                        return False
            return True
        return False


@dataclass(frozen=True)
class PillowFormatCapability:
    """True when the local Pillow build can decode WebP."""

    feature: str = "webp"

    def supports_modern_format(self) -> bool:
        return bool(features.check(self.feature))


_CAPABILITIES: Dict[str, Callable[[], FormatCapability]] = {
    "always": lambda: StaticFormatCapability(True),
    "never": lambda: StaticFormatCapability(False),
    "pillow": PillowFormatCapability,
}


def get_capability(name: str) -> FormatCapability:
    key = name.strip().lower()
    if key not in _CAPABILITIES:
        raise ValueError(f"Unknown format capability '{name}'")
    return _CAPABILITIES[key]()
