"""
ResultEnvelope Domain Model

One page of a filtered and sorted resource listing plus its pagination
metadata.
"""

import math
from dataclasses import dataclass
from typing import Any

from .resource import Resource


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    pages: int

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PageMeta":
        """pages is ceil(total / limit), so an empty result has zero pages"""
        return cls(total=total, page=page, limit=limit, pages=math.ceil(total / limit))

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "page": self.page, "limit": self.limit, "pages": self.pages}


@dataclass(frozen=True)
class ResultEnvelope:
    """
    Paginated listing returned by ResourceRepository.find_all.

    Cached as a whole; a different page or limit is a different envelope.
    """

    data: tuple[Resource, ...]
    meta: PageMeta

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": [resource.to_dict() for resource in self.data],
            "meta": self.meta.to_dict(),
        }
