# seo_gateway/resolver.py
"""
Resolver module: finds the prerendered SEO document among candidate locations.

Candidates are tried in priority order and the first one that exists and reads
back successfully wins, even if it is empty. A failing candidate is skipped, never fatal. The whole
search runs under one time budget; when nothing is found in time the embedded
fallback document is served instead.
"""
from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence, Tuple

from seo_gateway.logger import logger
from seo_gateway.models import ResolvedDocument

__all__ = ("DocumentResolver",)

# File reads get their own pool so a hung read never holds up asyncio.run() shutdown.
_READ_POOL = ThreadPoolExecutor(max_workers=4, thread_name_prefix="seo-gateway-read")


def _read_candidate(path: Path) -> Optional[bytes]:
    """Existence check then read. Returns None for a missing file."""
    if not path.is_file():
        return None
    return path.read_bytes()


class DocumentResolver:
    """Resolves the document body for crawler responses."""

    def __init__(
        self,
        candidates: Sequence[Path],
        fallback: bytes,
        timeout: float,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self.candidates: Tuple[Path, ...] = tuple(candidates)
        self.fallback = fallback
        self.timeout = timeout
        self._executor = executor or _READ_POOL

    async def resolve(self) -> ResolvedDocument:
        """Return the first readable candidate or the embedded fallback. Never raises."""
        try:
            found = await asyncio.wait_for(self._search(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(
                "Could not read prerendered document within %.2fs, using embedded fallback",
                self.timeout,
            )
            return ResolvedDocument(self.fallback)
        except Exception as exc:
            logger.error("Prerendered document lookup failed, using embedded fallback: %s", exc)
            return ResolvedDocument(self.fallback)

        if found is None:
            logger.error(
                "Could not find prerendered document in any of %d locations, using embedded fallback",
                len(self.candidates),
            )
            return ResolvedDocument(self.fallback)
        return found

    async def _search(self) -> Optional[ResolvedDocument]:
        loop = asyncio.get_running_loop()
        for path in self.candidates:
            try:
                content = await loop.run_in_executor(self._executor, _read_candidate, path)
            except OSError as exc:
                logger.warning("Skipping candidate %s: %s", path, exc)
                continue
            if content is None:
                logger.debug("No prerendered document at %s", path)
                continue
            logger.debug("Serving prerendered document from %s (%d bytes)", path, len(content))
            return ResolvedDocument(content, path)
        return None
