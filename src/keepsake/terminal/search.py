# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from keepsake.id_map import clear_id_map_if_required
from keepsake.model.record_kind import RecordKind
from keepsake.repository.book import BOOK_REPO
from keepsake.repository.gift import GIFT_REPO
from keepsake.repository.idea import IDEA_REPO
from keepsake.repository.note import NOTE_REPO
from keepsake.repository.phrase import PHRASE_REPO
from keepsake.repository.recipe import RECIPE_REPO
from keepsake.service.search import search_records
from keepsake.view.view.views.search import search_results_view


def search(
    query: str,
    kinds: Annotated[
        Optional[list[RecordKind]],
        typer.Option(
            "--kind", "-k", help="limit the search, accepts multiple kind options"
        ),
    ] = None,
) -> None:
    """
    Search every record kind for a case-insensitive substring.
    """
    clear_id_map_if_required()

    def wanted(kind: RecordKind) -> bool:
        return kinds is None or kind in kinds

    results = search_records(
        query,
        books=BOOK_REPO.get_all_records() if wanted(RecordKind.BOOK) else None,
        phrases=PHRASE_REPO.get_all_records() if wanted(RecordKind.PHRASE) else None,
        ideas=IDEA_REPO.get_all_records() if wanted(RecordKind.IDEA) else None,
        gifts=GIFT_REPO.get_all_records() if wanted(RecordKind.GIFT) else None,
        recipes=RECIPE_REPO.get_all_records() if wanted(RecordKind.RECIPE) else None,
        notes=NOTE_REPO.get_all_records() if wanted(RecordKind.NOTE) else None,
    )

    search_results_view(f"search: {query}", results)
