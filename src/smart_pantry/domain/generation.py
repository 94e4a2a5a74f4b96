"""Result values returned by the generation service."""

from dataclasses import dataclass
from enum import StrEnum


class GenerationErrorKind(StrEnum):
    """Stage of the generation pipeline that failed."""

    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    FORMAT = "format"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class GenerationError:
    """A failed generation, carrying the message shown to the caller."""

    kind: GenerationErrorKind
    message: str
