"""
sbdata_sandbox.db.repositories.articles

Repository for `Article` entities.

Responsibilities:
- CRUD via `CrudRepo`.
- Look articles up by author explicitly; nothing is join-fetched from `users`.
"""

from __future__ import annotations

from sqlalchemy import select

from sbdata_sandbox.db.models import Article
from sbdata_sandbox.db.repositories.crud import CrudRepo


class ArticleRepo(CrudRepo[Article, str]):
    entity_type = Article

    async def find_by_author_id(self, author_id: str) -> list[Article]:
        stmt = (
            select(Article)
            .where(Article.author_id == author_id)
            .order_by(Article.created_at, Article.article_id)
        )
        return await self._detached(stmt)


# --- Module Notes -----------------------------------------------------------
# Load the author separately with `UserRepo.find_by_id(article.author_id)` when needed.
