from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChunkSummary:
    """Summary of one chunk, or the placeholder that replaced it."""

    text: str
    succeeded: bool


@dataclass(frozen=True)
class SectionSummary:
    """Joined summary for one section plus the per-chunk outcomes."""

    text: str
    chunks: list[ChunkSummary] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return any(chunk.succeeded for chunk in self.chunks)
