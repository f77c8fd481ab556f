"""
sbdata_sandbox.services.blog_service

Demo service exercising insert/update dispatch and transaction timing.

Responsibilities:
- Run the basic CRUD walkthrough with one transaction per repository call.
- Run the three transaction examples: commit at the end, commit on early
  return, rollback on failure.
- Clean all sandbox tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sbdata_sandbox.db.models import AccessLog, Article, User
from sbdata_sandbox.db.repositories import AccessLogRepo, ArticleRepo, UserRepo
from sbdata_sandbox.db.session import transaction_scope
from sbdata_sandbox.errors import DemoFailure
from sbdata_sandbox.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class BasicExamplesOutcome:
    inserted_access_log_id: int
    updated_access_log: AccessLog
    saved_user: User
    saved_article: Article
    found_article: Article | None


class BlogService:
    def __init__(self, *, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def basic_examples(self) -> BasicExamplesOutcome:
        # Each call below is its own transaction (BEGIN ... COMMIT per save).
        async with transaction_scope(self._session_factory) as session:
            access_log = await AccessLogRepo(session).save(AccessLog(message="hoge"))
        log.info("basic.access_log_inserted", entity=repr(access_log))
        inserted_id = access_log.id

        # Same instance, id now populated: this save is an UPDATE.
        access_log.message = "fuga"
        async with transaction_scope(self._session_factory) as session:
            access_log = await AccessLogRepo(session).save(access_log)
        log.info("basic.access_log_updated", entity=repr(access_log))

        # Client-assigned key: without the flag this would be an UPDATE of nothing.
        user = User(user_id="u1", name="kenshiro", force_insert_on_save=True)
        async with transaction_scope(self._session_factory) as session:
            saved_user = await UserRepo(session).save(user)
        log.info("basic.user_inserted", entity=repr(saved_user))

        article = Article(
            article_id="a1",
            head="head1",
            description="desc1",
            author_id=user.user_id,
            force_insert_on_save=True,
        )
        async with transaction_scope(self._session_factory) as session:
            saved_article = await ArticleRepo(session).save(article)
        log.info("basic.article_inserted", entity=repr(saved_article))

        # Only author_id comes back; the author row is not joined in.
        async with transaction_scope(self._session_factory) as session:
            found_article = await ArticleRepo(session).find_by_id("a1")
        log.info("basic.article_found", entity=repr(found_article))

        return BasicExamplesOutcome(
            inserted_access_log_id=inserted_id,
            updated_access_log=access_log,
            saved_user=saved_user,
            saved_article=saved_article,
            found_article=found_article,
        )

    async def transaction_example_1(self) -> None:
        """Three saves, one COMMIT when the block ends."""

        async with transaction_scope(self._session_factory) as session:
            users, articles = UserRepo(session), ArticleRepo(session)
            await users.save(User(user_id="u1", name="n1", force_insert_on_save=True))
            # Not committed yet.
            await articles.save(_article("a1", "u1", 1))
            await articles.save(_article("a2", "u1", 2))

    async def transaction_example_2(self, *, stop_early: bool = True) -> None:
        """Early return still commits what was saved before it."""

        async with transaction_scope(self._session_factory) as session:
            users, articles = UserRepo(session), ArticleRepo(session)
            await users.save(User(user_id="u1", name="n1", force_insert_on_save=True))
            await articles.save(_article("a1", "u1", 1))
            if stop_early:
                return
            await articles.save(_article("a2", "u1", 2))

    async def transaction_example_3(self) -> None:
        """A failure inside the block rolls back every save in it."""

        async with transaction_scope(self._session_factory) as session:
            users, articles = UserRepo(session), ArticleRepo(session)
            await users.save(User(user_id="u1", name="n1", force_insert_on_save=True))
            await articles.save(_article("a1", "u1", 1))
            raise DemoFailure("Dummy error")

    async def clean(self) -> None:
        # Articles first: they reference users.
        async with transaction_scope(self._session_factory) as session:
            await ArticleRepo(session).delete_all()
            await UserRepo(session).delete_all()
            await AccessLogRepo(session).delete_all()
        log.info("clean.done")


def _article(article_id: str, author_id: str, n: int) -> Article:
    return Article(
        article_id=article_id,
        author_id=author_id,
        head=f"head{n}",
        description=f"desc{n}",
        force_insert_on_save=True,
    )


# --- Module Notes -----------------------------------------------------------
# Run with `SBDATA_ECHO_SQL=true` to see where BEGIN, COMMIT and ROLLBACK are emitted.
