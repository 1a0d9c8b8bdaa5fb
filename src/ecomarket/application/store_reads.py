"""Concurrent fan-out of independent store reads.

Repositories are synchronous, so each read runs in a worker thread and
the results are joined before any aggregation starts. Every read is
allowed to settle; the first failure (in argument order) is then raised
as a single DataAccessError and no partial result is returned.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from ecomarket.domain.exceptions import DataAccessError, DomainException

logger = logging.getLogger(__name__)

Read = Callable[[], Any]


def gather_reads(reads: dict[str, Read]) -> dict[str, Any]:
    """Run every read concurrently and return their results by name."""
    return asyncio.run(_gather(reads))


async def _gather(reads: dict[str, Read]) -> dict[str, Any]:
    names = list(reads)
    results = await asyncio.gather(
        *(asyncio.to_thread(reads[name]) for name in names),
        return_exceptions=True,
    )

    for name, result in zip(names, results):
        if isinstance(result, DomainException):
            raise result
        if isinstance(result, Exception):
            logger.error("Store read %r failed: %s", name, result)
            raise DataAccessError(f"Failed to read {name}: {result}") from result

    return dict(zip(names, results))
