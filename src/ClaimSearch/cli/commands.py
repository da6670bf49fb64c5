"""Command implementations for ClaimSearch CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass

from ClaimSearch.config import AppConfig
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.services.search import ClaimSearchService
from ClaimSearch.utils.log import log


@dataclass(slots=True)
class CompileCommand:
    """Compile one request into a search body and render it as JSON."""

    config: AppConfig
    search_service: ClaimSearchService

    def execute(self, request: SearchRequest, *, size: int | None = None, offset: int = 0) -> str:
        """Build the body for ``request``.

        Returns:
            Pretty-printed JSON body.
        """
        log.info("Compiling query: s=%r index=%s", request.s, self.search_service.index)
        body = self.search_service.build_body(request, size=size, offset=offset)
        filters = body["query"]["bool"].get("filter", [])
        log.debug("Compiled body has %d filter clause(s)", len(filters))
        return json.dumps(body, ensure_ascii=False, indent=2)
