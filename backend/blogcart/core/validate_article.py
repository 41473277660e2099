"""Article Validation — the single schema gate for every article write.

Invariants:
    - Returns a normalized dict keyed by ORM attribute names (user_id, not userId)
    - partial=True keeps only the keys the client sent
    - validate_articles validates the whole batch before returning anything:
      one bad item fails the batch, with each error tagged by its item index
    - Raises ArticleValidationError, never pydantic.ValidationError

Design Decisions:
    - Pydantic schemas do the field checks; this module only shapes the errors
      and the output (ADR: one gate, many callers)
"""

from typing import Any

from pydantic import ValidationError

from blogcart.core.errors import ArticleValidationError
from blogcart.schemas.article import ArticleCreate, ArticleUpdate


def _error_details(exc: ValidationError, prefix: str = "") -> list[dict[str, Any]]:
    return [
        {
            "field": prefix + ".".join(str(loc) for loc in e["loc"]) if e["loc"] else prefix.rstrip("."),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _normalize(payload: Any, partial: bool, prefix: str = "") -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ArticleValidationError([{
            "field": prefix.rstrip(".") or "body",
            "message": "Article payload must be a JSON object",
            "type": "dict_type",
        }])
    schema = ArticleUpdate if partial else ArticleCreate
    try:
        article = schema.model_validate(payload)
    except ValidationError as exc:
        raise ArticleValidationError(_error_details(exc, prefix)) from exc
    fields = article.model_dump(exclude_unset=partial)
    if "state" in fields and fields["state"] is not None:
        fields["state"] = fields["state"].value
    return fields


def validate_article(payload: Any, partial: bool = False) -> dict[str, Any]:
    """Validate one article payload and return ORM-ready fields."""
    return _normalize(payload, partial)


def validate_articles(payloads: list[Any]) -> list[dict[str, Any]]:
    """Validate a batch of creation payloads; all-or-nothing."""
    normalized: list[dict[str, Any]] = []
    details: list[dict[str, Any]] = []
    for index, payload in enumerate(payloads):
        try:
            normalized.append(_normalize(payload, False, f"{index}."))
        except ArticleValidationError as exc:
            details.extend(exc.details or [])
    if details:
        raise ArticleValidationError(details)
    return normalized
