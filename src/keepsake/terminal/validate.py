# SPDX-License-Identifier: MIT

"""Typer callbacks and helpers turning validation failures into usage errors."""

from typing import Optional

import typer

from keepsake import validation
from keepsake.model.entity_id import EntityId
from keepsake.model.record_kind import RecordKind
from keepsake.repository.id_map import ID_MAP_REPO
from keepsake.terminal.parse import parse_id_list


def validate_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    try:
        return validation.validate_required_text(title, "title")
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_phrase_text(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    try:
        return validation.validate_required_text(
            text, "phrase", validation.PHRASE_MAX_LENGTH
        )
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_text(text: Optional[str]) -> Optional[str]:
    try:
        return validation.validate_optional_text(text, "text")
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_rating(rating: Optional[int]) -> Optional[int]:
    try:
        return validation.validate_rating(rating)
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_budget(budget: Optional[float]) -> Optional[float]:
    try:
        return validation.validate_budget(budget)
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_tags(tags: Optional[list[str]]) -> Optional[list[str]]:
    return validation.validate_tags(tags)


def validate_pages(
    current_page: Optional[int], total_pages: Optional[int]
) -> tuple[Optional[int], Optional[int]]:
    try:
        return validation.validate_pages(current_page, total_pages)
    except validation.ValidationError as e:
        raise typer.BadParameter(str(e))


def validate_real_id(kind: RecordKind, synthetic_id: int) -> EntityId:
    """
    Resolve a short id from the last listing.

    Raises:
        typer.BadParameter: If the short id was never handed out
    """
    real_id = ID_MAP_REPO.get_real_id(kind, synthetic_id)
    if real_id is None:
        raise typer.BadParameter(f"No {kind} with id {synthetic_id}, list them first")
    return real_id


def validate_real_ids(kind: RecordKind, id_param: str) -> list[EntityId]:
    return [
        validate_real_id(kind, synthetic_id) for synthetic_id in parse_id_list(id_param)
    ]
