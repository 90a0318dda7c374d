from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import FormatError, InvalidVariantError

DATA_PATH = Path(__file__).resolve().parent / "data" / "formats.json"

BITMAP = "bitmap"
GRAYMAP = "graymap"
PIXMAP = "pixmap"

P1 = "P1"
P2 = "P2"
P3 = "P3"
P4 = "P4"
P5 = "P5"
P6 = "P6"


@dataclass(frozen=True)
class FormatVariant:
    """One magic-number entry of the Netpbm variant table."""

    magic: str
    name: str
    family: str
    binary: bool
    channels: int
    has_max_value: bool

    @property
    def is_bitmap(self) -> bool:
        return self.family == BITMAP

    def row_bytes(self, width: int) -> int:
        """Number of payload bytes per row for binary variants."""
        if self.is_bitmap:
            return (width + 7) // 8
        return width * self.channels


class FormatRegistry:
    """Variant table keyed by magic number, in file order."""

    def __init__(self, variants: Iterable[FormatVariant]) -> None:
        self._by_magic: Dict[str, FormatVariant] = {}
        for variant in variants:
            if variant.magic in self._by_magic:
                raise ValueError(f"Duplicate magic number in variant table: {variant.magic!r}")
            self._by_magic[variant.magic] = variant

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "FormatRegistry":
        return _load_registry(path.resolve())

    @property
    def variants(self) -> List[FormatVariant]:
        return list(self._by_magic.values())

    def get(self, magic: str) -> Optional[FormatVariant]:
        return self._by_magic.get(magic)

    def for_family(self, family: str, binary: bool) -> FormatVariant:
        for variant in self._by_magic.values():
            if variant.family == family and variant.binary == binary:
                return variant
        raise InvalidVariantError(f"No variant for family {family!r} (binary={binary})")

    def require_decodable(self, magic: str) -> FormatVariant:
        variant = self.get(magic)
        if variant is None:
            raise FormatError(f"Unknown magic number: {magic!r}")
        return variant

    def require(self, magic: str) -> FormatVariant:
        variant = self.get(magic)
        if variant is None:
            raise InvalidVariantError(f"Unknown variant: {magic!r}")
        return variant


def lookup(magic: str) -> FormatVariant:
    """Resolve a magic number against the packaged variant table."""
    return FormatRegistry.load().require(magic)


@lru_cache(maxsize=None)
def _load_registry(path: Path) -> FormatRegistry:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return FormatRegistry(FormatVariant(**item) for item in raw)
