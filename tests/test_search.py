# SPDX-License-Identifier: MIT

from keepsake.model.record_kind import RecordKind
from keepsake.service.search import search_records
from keepsake.template.book import get_book_template
from keepsake.template.note import get_note_template
from keepsake.template.phrase import get_phrase_template
from keepsake.template.recipe import get_recipe_template


def test_search_across_kinds() -> None:
    book = get_book_template()
    book["id"] = "book-1"
    book["title"] = "The Tea Book"
    book["author"] = "Linda Gaylard"
    phrase = get_phrase_template()
    phrase["id"] = "phrase-1"
    phrase["text"] = "A cup of tea and quiet."
    recipe = get_recipe_template()
    recipe["id"] = "recipe-1"
    recipe["title"] = "Scones"
    recipe["ingredients"] = ["flour", "black tea"]
    note = get_note_template()
    note["id"] = "note-1"
    note["title"] = "Groceries"

    results = search_records(
        "TEA", books=[book], phrases=[phrase], recipes=[recipe], notes=[note]
    )

    assert [(result["kind"], result["id"]) for result in results] == [
        (RecordKind.BOOK, "book-1"),
        (RecordKind.PHRASE, "phrase-1"),
        (RecordKind.RECIPE, "recipe-1"),
    ]
    assert results[0]["title"] == "The Tea Book"
    assert results[0]["detail"] == "Linda Gaylard"
    assert results[1]["detail"] is None
    assert results[2]["detail"] == "dinner"


def test_search_skips_kinds_not_given() -> None:
    book = get_book_template()
    book["title"] = "Tea"

    assert search_records("tea") == []
    assert len(search_records("tea", books=[book])) == 1
