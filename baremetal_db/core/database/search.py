"""
Free-text search predicates.

Listing filters accept a ``search_query`` that matches rows either through
Postgres full-text search over a set of text columns, or through a
case-insensitive substring match on any one of them. Both halves are OR'ed
into a single group so the rest of the filter can AND with it.

The full-text half only works on Postgres; the ILIKE half is portable.
"""

from __future__ import annotations

import re
from typing import Any, List, Sequence

from sqlalchemy import Text, cast, func, literal_column, or_

# Characters with a meaning inside to_tsquery input
_TSQUERY_SPECIAL = re.compile(r"[&|!():*<>'\"\\]")

_TS_CONFIG = literal_column("'english'::regconfig")
_SPACE = literal_column("' '")


def to_tsquery_tokens(text: str) -> str:
    """Normalize free text into a ``to_tsquery`` expression.

    Each whitespace-separated word becomes a prefix match, and all words must
    match: ``"rack 12"`` becomes ``"rack:* & 12:*"``.

    Args:
        text: Raw user search input

    Returns:
        tsquery expression, or an empty string when nothing searchable is left
    """
    tokens: List[str] = []
    for word in text.split():
        cleaned = _TSQUERY_SPECIAL.sub(" ", word).split()
        tokens.extend(f"{token}:*" for token in cleaned)
    return " & ".join(tokens)


def build_search_clause(query: str, text_columns: Sequence[Any], cast_columns: Sequence[Any] = ()):
    """Build the combined full-text / ILIKE search predicate.

    Args:
        query: Raw search input
        text_columns: String columns searched as they are
        cast_columns: Non-string columns (JSON, UUID) cast to text before searching

    Returns:
        A single OR'ed SQL expression
    """
    columns = list(text_columns) + [cast(column, Text) for column in cast_columns]
    pattern = f"%{query}%"
    predicates = [column.ilike(pattern) for column in columns]

    tokens = to_tsquery_tokens(query)
    if tokens:
        document = func.concat_ws(_SPACE, *[func.coalesce(column, _SPACE) for column in columns])
        full_text = func.to_tsvector(_TS_CONFIG, document).op("@@")(func.to_tsquery(_TS_CONFIG, tokens))
        predicates.insert(0, full_text)

    return or_(*predicates)
