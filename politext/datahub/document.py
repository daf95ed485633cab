from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Document:
    """A single tweet or speech attributed to one author."""

    doc_id: str
    author: str
    text: str
    timestamp: datetime
