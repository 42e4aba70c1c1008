from dataclasses import dataclass


@dataclass(frozen=True)
class DefinitionLookup:
    """Result of one dictionary lookup; ``definition`` is a fallback when not found."""

    term: str
    definition: str
    found: bool
