from documind.domains.sources.entities import Source, SourceType
from documind.domains.sources.schemas import (
    SourceCreate, GetSourcesInput, DeleteSourceInput, SourceResponse
)

__all__ = [
    "Source", "SourceType",
    "SourceCreate", "GetSourcesInput", "DeleteSourceInput", "SourceResponse",
]
