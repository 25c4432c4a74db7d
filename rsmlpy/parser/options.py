"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from rsmlpy.diagnostics import Severity


class ParseMode(StrEnum):
    """Top-level parser behavior profile.

    Both modes build the same tree; they differ only in how recovery
    diagnostics are reported.
    """

    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar acceptance and recovery reporting."""

    mode: ParseMode = ParseMode.LENIENT
    allow_bare_properties: bool = True
    allow_macros: bool = True

    @property
    def recovery_severity(self) -> Severity:
        return "error" if self.mode == ParseMode.STRICT else "warning"

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)
