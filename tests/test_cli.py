"""
tests.test_cli

`python -m sbdata_sandbox` runner.

Responsibilities:
- Argument parsing defaults and choices.
- Exit status and cleanup behaviour of `run`.
"""

from __future__ import annotations

import pytest

from sbdata_sandbox.__main__ import EXAMPLES, build_parser, run
from sbdata_sandbox.db.repositories import ArticleRepo, UserRepo
from sbdata_sandbox.db.session import create_engine, create_sessionmaker, transaction_scope
from sbdata_sandbox.settings import Settings


async def _counts(settings: Settings) -> tuple[int, int]:
    engine = create_engine(settings)
    try:
        async with transaction_scope(create_sessionmaker(engine)) as session:
            return await UserRepo(session).count(), await ArticleRepo(session).count()
    finally:
        await engine.dispose()


def test_parser_defaults_to_rollback_example() -> None:
    args = build_parser().parse_args([])
    assert args.example == "tx-rollback"
    assert args.keep is False


def test_parser_rejects_unknown_example() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["nope"])


def test_every_example_is_selectable() -> None:
    assert set(EXAMPLES) == {"basic", "tx-commit", "tx-early-return", "tx-rollback"}


@pytest.mark.asyncio
async def test_run_keep_leaves_committed_rows(settings: Settings) -> None:
    assert await run("tx-commit", settings=settings, keep=True) == 0
    assert await _counts(settings) == (1, 2)


@pytest.mark.asyncio
async def test_run_cleans_up_by_default(settings: Settings) -> None:
    assert await run("basic", settings=settings) == 0
    assert await _counts(settings) == (0, 0)


@pytest.mark.asyncio
async def test_run_rollback_example_exits_nonzero(settings: Settings) -> None:
    assert await run("tx-rollback", settings=settings, keep=True) == 1
    assert await _counts(settings) == (0, 0)
