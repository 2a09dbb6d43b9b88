"""Fan-in of per-job results into one de-duplicated, sorted batch error."""

import asyncio
import logging
from typing import Iterable, Optional, Set

from ffmpeg_batch.common import Job
from ffmpeg_batch.exceptions import BatchError

logger = logging.getLogger(__name__)

# Put on the result queue once every job has reported
CLOSED = None


def build_error(messages: Iterable[str]) -> Optional[BatchError]:
    """Return None for no messages, else one BatchError with sorted lines."""
    messages = set(messages)
    if not messages:
        return None
    return BatchError(list(messages))


async def collect_errors(
    results: "asyncio.Queue[Optional[Job]]",
    cancel: asyncio.Event,
) -> Optional[BatchError]:
    """Drain ``results`` until it is closed or ``cancel`` is set.

    On cancellation the errors collected so far are returned without
    waiting for outstanding jobs.
    """
    errors: Set[str] = set()
    cancel_waiter = asyncio.ensure_future(cancel.wait())

    try:
        while True:
            if cancel.is_set():
                logger.info("Cancelled; returning %s error(s) collected so far", len(errors))
                return build_error(errors)

            getter = asyncio.ensure_future(results.get())
            done, _ = await asyncio.wait(
                {getter, cancel_waiter}, return_when=asyncio.FIRST_COMPLETED
            )
            if getter not in done:
                getter.cancel()
                continue

            job = getter.result()
            if job is CLOSED:
                break
            if job.failed:
                errors.add(job.error)
    finally:
        cancel_waiter.cancel()

    return build_error(errors)
