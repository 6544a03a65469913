from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LINK_CONTENT_TYPE = "link"


@dataclass
class LinkContent:
    url: str
    type: str = LINK_CONTENT_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "url": self.url}


@dataclass
class Bookmark:
    """One Karakeep bookmark as written to the import document."""

    created_at: int
    title: str
    content: LinkContent
    archived: bool
    tags: List[str] = field(default_factory=list)
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "createdAt": self.created_at,
            "title": self.title,
            "tags": list(self.tags),
            "content": self.content.to_dict(),
            "archived": self.archived,
            "note": self.note,
        }
