import asyncio
import logging
import sys
from typing import List, Optional

import uvicorn

from .cli import DEFAULT_HOST, DEFAULT_PORT, parse_args
from .errors import DurationError
from .evaluator import evaluate_seconds, evaluate_tokens
from .expression import parse_expression
from .logging_async import get_logger, log_worker
from .webapp import create_app


def render_result(tokens: List[str]) -> str:
    result = evaluate_tokens(tokens)
    return str(result)


def total_seconds(tokens: List[str]) -> int:
    return evaluate_seconds(parse_expression(tokens))


async def serve_async(params):
    host = getattr(params, "host", DEFAULT_HOST)
    port = getattr(params, "port", DEFAULT_PORT)
    log_level = getattr(params, "log_level", "info")
    level = getattr(logging, log_level.upper())

    log_queue: asyncio.Queue = asyncio.Queue()
    stop_event = asyncio.Event()
    log_task = asyncio.create_task(log_worker(log_queue, stop_event, level=level))
    logger = get_logger(log_queue, level=level)

    app = create_app(logger)
    config = uvicorn.Config(
        app, host=host, port=port, loop="asyncio", log_level=log_level
    )
    server = uvicorn.Server(config)

    logger.info(f"[start] serving on http://{host}:{port}")
    try:
        await server.serve()
    finally:
        stop_event.set()
        await log_queue.join()
        log_task.cancel()
        await asyncio.gather(log_task, return_exceptions=True)
        print("[exit] done.")


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        if params.command == "eval":
            print(render_result(params.tokens))
        elif params.command == "seconds":
            print(total_seconds(params.tokens))
        elif params.command == "serve":
            try:
                asyncio.run(serve_async(params))
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except DurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
