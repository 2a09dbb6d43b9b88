"""
Batch dispatcher.

Runs one ffmpeg job per input file with a concurrency ceiling, funnels every
outcome through a single result queue and hands it to the error aggregator.
"""
import asyncio
import logging
import os
from typing import Awaitable, Callable, List, Optional, Sequence

from ffmpeg_batch.aggregator import CLOSED, collect_errors
from ffmpeg_batch.command_generator import build_job, format_command
from ffmpeg_batch.common import Job
from ffmpeg_batch.config import get_settings
from ffmpeg_batch.exceptions import BatchError, ConversionError
from ffmpeg_batch.execution import run_command
from ffmpeg_batch.options import OptionSet
from ffmpeg_batch.output import check_output_target

logger = logging.getLogger(__name__)

# runner(command, cancel, quiet, label); raises ConversionError on failure
Runner = Callable[[List[str], asyncio.Event, bool, str], Awaitable[object]]


def effective_workers(requested: int, cpu_count: Optional[int] = None) -> int:
    """Clamp a requested worker count to [1, cpu_count - 1]."""
    if cpu_count is None:
        cpu_count = os.cpu_count() or 1

    max_workers = cpu_count - 1
    if requested > max_workers:
        requested = max_workers
    if requested < 1:
        return 1
    return requested


async def run_batch(
    options: OptionSet,
    inputs: Sequence[str],
    cancel: Optional[asyncio.Event] = None,
    *,
    runner: Optional[Runner] = None,
    binary: Optional[str] = None,
    cpu_count: Optional[int] = None,
) -> Optional[BatchError]:
    """Convert every input and return the aggregate error, if any.

    Every input is attempted exactly once; failures never stop sibling
    jobs. Setting ``cancel`` makes this return immediately with whatever
    errors were collected, and tears down jobs still running.

    Raises:
        OutputConflictError: Before any job starts, if a single output
            file was given for several inputs.
    """
    check_output_target(options, inputs)

    if cancel is None:
        cancel = asyncio.Event()
    if runner is None:
        runner = run_command
    if binary is None:
        binary = get_settings().ffmpeg_binary

    workers = effective_workers(options.workers, cpu_count)
    logger.info("Converting %s file(s) with %s worker(s)", len(inputs), workers)

    semaphore = asyncio.Semaphore(workers)
    results: "asyncio.Queue[Optional[Job]]" = asyncio.Queue(maxsize=1)

    async def convert_one(input_path: str) -> None:
        async with semaphore:
            job = build_job(options, input_path, binary=binary)
            if options.show_command:
                print(format_command(job.command), flush=True)
            logger.debug("Starting %s -> %s", job.input_path, job.output_path)
            try:
                await runner(job.command, cancel, options.quiet, job.input_path)
            except ConversionError as e:
                job.error = str(e)
                logger.warning("Conversion failed: %s", job.error)
            else:
                logger.debug("Finished %s", job.input_path)
        await results.put(job)

    tasks = [asyncio.create_task(convert_one(path)) for path in inputs]

    async def close_when_done() -> None:
        await asyncio.gather(*tasks, return_exceptions=True)
        await results.put(CLOSED)

    closer = asyncio.create_task(close_when_done())

    try:
        aggregate = await collect_errors(results, cancel)
    finally:
        pending = [t for t in tasks + [closer] if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("Tearing down %s outstanding job(s)", len(pending))
            await asyncio.gather(*pending, return_exceptions=True)

    # Anything other than ConversionError is a bug; surface it
    for task in tasks:
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    return aggregate


def convert_all(
    options: OptionSet,
    inputs: Sequence[str],
    *,
    install_signals: Optional[Callable[[asyncio.Event], None]] = None,
    **kwargs,
) -> Optional[BatchError]:
    """Synchronous entry point: run a whole batch in a fresh event loop.

    ``install_signals`` is called inside the loop with the batch's cancel
    event so the caller can wire process signals to it.
    """
    async def _main() -> Optional[BatchError]:
        cancel = asyncio.Event()
        if install_signals is not None:
            install_signals(cancel)
        return await run_batch(options, inputs, cancel, **kwargs)

    return asyncio.run(_main())
