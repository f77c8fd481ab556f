"""
sbdata_sandbox.__main__

Entrypoint for running a demo via `python -m sbdata_sandbox <example>`.

Responsibilities:
- Load settings and configure logging.
- Create the engine (and tables in dev/test), run one example, clean up.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable, Callable, Sequence

from sbdata_sandbox.db.init_db import init_db
from sbdata_sandbox.db.session import create_engine, create_sessionmaker
from sbdata_sandbox.errors import SandboxError
from sbdata_sandbox.observability.logging import configure_logging, get_logger
from sbdata_sandbox.services.blog_service import BlogService
from sbdata_sandbox.settings import Settings, get_settings

log = get_logger(__name__)

EXAMPLES: dict[str, Callable[[BlogService], Awaitable[object]]] = {
    "basic": lambda service: service.basic_examples(),
    "tx-commit": lambda service: service.transaction_example_1(),
    "tx-early-return": lambda service: service.transaction_example_2(),
    "tx-rollback": lambda service: service.transaction_example_3(),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sbdata_sandbox",
        description="Run one persistence/transaction demo against the configured database.",
    )
    parser.add_argument("example", choices=sorted(EXAMPLES), nargs="?", default="tx-rollback")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="leave the rows in place instead of cleaning all tables afterwards",
    )
    return parser


async def run(example: str, *, settings: Settings, keep: bool = False) -> int:
    engine = create_engine(settings)
    try:
        if settings.env in ("dev", "test"):
            await init_db(engine)
        service = BlogService(session_factory=create_sessionmaker(engine))
        try:
            log.info("example.start", example=example)
            await EXAMPLES[example](service)
            log.info("example.done", example=example)
        except SandboxError:
            log.exception("example.failed", example=example)
            return 1
        finally:
            if not keep:
                await service.clean()
    finally:
        await engine.dispose()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json_logs=settings.log_json
    )
    return asyncio.run(run(args.example, settings=settings, keep=args.keep))


if __name__ == "__main__":
    raise SystemExit(main())


# --- Module Notes -----------------------------------------------------------
# `tx-rollback` is the default, matching the example the sandbox was last used for.
