"""
Builder for IGDB's Apicalypse query bodies.

A body is a sequence of clauses terminated by semicolons, e.g.::

    fields name, genres; where genres = (5,12) & rating > 60; limit 100;

Predicates are plain strings so they can be composed with ``all_of`` before
being handed to ``CatalogQuery.filter``.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field


def _join_values(values: Iterable[int]) -> str:
    return ",".join(str(int(v)) for v in values)


def equals(field: str, value: int | str) -> str:
    return f"{field} = {value}"


def contains_any(field: str, values: Iterable[int]) -> str:
    """Array field shares at least one value with ``values``."""
    return f"{field} = ({_join_values(values)})"


def excludes(field: str, values: Iterable[int]) -> str:
    return f"{field} != ({_join_values(values)})"


def greater_than(field: str, value: int | float) -> str:
    return f"{field} > {value}"


def at_least(field: str, value: int | float) -> str:
    return f"{field} >= {value}"


def is_null(field: str) -> str:
    return f"{field} = null"


def all_of(*predicates: str) -> str:
    return " & ".join(p for p in predicates if p)


def not_an_edition() -> str:
    """Exclude expansions, DLC, remasters and other derived versions."""
    return all_of(is_null("parent_game"), is_null("version_parent"))


def escape_search_term(term: str) -> str:
    return term.replace("\\", "\\\\").replace('"', '\\"')


class CatalogQuery(BaseModel):
    endpoint: str = "games"
    fields: list[str] = Field(default_factory=lambda: ["*"])
    search: str | None = None
    where: list[str] = Field(default_factory=list)
    limit: int | None = None

    def filter(self, *predicates: str) -> "CatalogQuery":
        """Add predicates; they are joined with ``&``. Empty ones are ignored."""
        self.where.extend(p for p in predicates if p)
        return self

    def render(self) -> str:
        clauses = [f"fields {', '.join(self.fields)};"]
        if self.search is not None:
            clauses.append(f'search "{escape_search_term(self.search)}";')
        if self.where:
            clauses.append(f"where {all_of(*self.where)};")
        if self.limit is not None:
            clauses.append(f"limit {self.limit};")
        return " ".join(clauses)
