"""Query parameter parsing, text search and pagination shared by list endpoints"""

import math
import re
from typing import Any, List, Optional, Sequence, Tuple

from fastapi import Query
from sqlalchemy import Select, false, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.common import Pagination

FLAG_PATTERN = "^(true|false)$"

# Words too common to narrow a search
STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "in", "is",
    "it", "of", "on", "or", "the", "to", "with",
})

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


def flag_query(description: str):
    """A boolean filter that only accepts the literal strings "true" and "false"."""
    return Query(None, pattern=FLAG_PATTERN, description=description)


def parse_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value == "true"


def tokenize(search: str) -> List[str]:
    """Split free text into lowercase search tokens, dropping stop words"""
    tokens = []
    for token in _TOKEN_RE.findall(search.lower()):
        if token not in STOP_WORDS and token not in tokens:
            tokens.append(token)
    return tokens


def text_search(columns: Sequence[Any], search: str):
    """Build a token search predicate over the given text columns.

    A row matches when any column has a word starting with any of the search
    tokens, where a word starts the text or follows whitespace or punctuation.
    Case-insensitive. Input without usable tokens matches nothing.
    """
    tokens = tokenize(search)
    if not tokens:
        return false()

    clauses = []
    for token in tokens:
        pattern = r"(^|\W)" + re.escape(token)
        for column in columns:
            clauses.append(func.lower(column).regexp_match(pattern))
    return or_(*clauses)


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


async def paginate(
    db: AsyncSession,
    query: Select,
    page: int,
    limit: int,
) -> Tuple[List[Any], Pagination]:
    """Run a filtered query for one page plus an independent count of all matches.

    The query must already carry its filters; ordering is applied by the caller.
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total_result = await db.execute(count_query)
    total = total_result.scalar() or 0

    offset = (page - 1) * limit
    result = await db.execute(query.offset(offset).limit(limit))
    items = result.scalars().all()

    return list(items), Pagination(current=page, pages=page_count(total, limit), total=total)
