"""Parse modes and configuration options."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from hanslope.diagnostics import DiagnosticSpec


class ParseMode(StrEnum):
    """How much of the input a successful parse must consume."""

    STRICT = "strict"
    PREFIX = "prefix"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Pipeline behaviour and the diagnostics registered per failure label."""

    mode: ParseMode = ParseMode.STRICT
    labels: Mapping[str, DiagnosticSpec] = MappingProxyType({})

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @property
    def requires_full_input(self) -> bool:
        return self.mode == ParseMode.STRICT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParseOptions":
        return ParseOptions(mode=mode)
