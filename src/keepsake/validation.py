# SPDX-License-Identifier: MIT

"""
Input validation shared by every record family.

Callers validate before handing a record to a repository; repositories do
not re-validate.
"""

from typing import Optional

TITLE_MAX_LENGTH = 100
TEXT_MAX_LENGTH = 500
PHRASE_MAX_LENGTH = 200
RATING_MIN = 1
RATING_MAX = 10


class ValidationError(ValueError):
    pass


def validate_required_text(
    value: Optional[str], field: str = "title", max_length: int = TITLE_MAX_LENGTH
) -> str:
    """Strip and return a required text value."""
    stripped = (value or "").strip()
    if stripped == "":
        raise ValidationError(f"{field} cannot be empty")
    if len(stripped) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return stripped


def validate_optional_text(
    value: Optional[str], field: str, max_length: int = TEXT_MAX_LENGTH
) -> Optional[str]:
    """Strip an optional text value, mapping blank input to None."""
    if value is None:
        return None
    stripped = value.strip()
    if stripped == "":
        return None
    if len(stripped) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return stripped


def validate_rating(rating: Optional[int]) -> Optional[int]:
    if rating is None:
        return None
    if not (RATING_MIN <= rating <= RATING_MAX):
        raise ValidationError(
            f"rating must be between {RATING_MIN} and {RATING_MAX} (inclusive)"
        )
    return rating


def validate_pages(
    current_page: Optional[int], total_pages: Optional[int]
) -> tuple[Optional[int], Optional[int]]:
    if current_page is not None and current_page < 0:
        raise ValidationError("current page cannot be negative")
    if total_pages is not None and total_pages <= 0:
        raise ValidationError("total pages must be positive")
    if (
        current_page is not None
        and total_pages is not None
        and current_page > total_pages
    ):
        raise ValidationError("current page cannot exceed total pages")
    return current_page, total_pages


def validate_budget(budget: Optional[float]) -> Optional[float]:
    if budget is None:
        return None
    if budget < 0:
        raise ValidationError("budget cannot be negative")
    return budget


def validate_tags(tags: Optional[list[str]]) -> Optional[list[str]]:
    """Strip and deduplicate tags, keeping first occurrence order."""
    if tags is None:
        return None
    cleaned = [tag.strip() for tag in tags if tag.strip() != ""]
    if len(cleaned) == 0:
        return None
    return list(dict.fromkeys(cleaned))
