# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.book import Book


def format_tags(tags: Optional[list[str]]) -> str:
    if tags is None:
        return ""
    return ", ".join(tags)


def first_line(text: Optional[str]) -> str:
    if text is None or text == "":
        return ""
    return text.split("\n")[0].strip()


def format_rating(rating: Optional[int]) -> str:
    if rating is None:
        return ""
    return f"{rating}/10"


def format_pages(book: Book) -> str:
    state = book["state"]
    if state["status"] != "reading" or state["current_page"] is None:
        return ""
    if state["total_pages"] is None:
        return f"p. {state['current_page']}"
    return f"{state['current_page']}/{state['total_pages']}"


def format_budget(budget: Optional[float]) -> str:
    if budget is None:
        return ""
    return f"{budget:.2f}"


def progress_bar(progress: float, width: int = 20) -> str:
    """Render a 0..1 fraction as a fixed-width text bar."""
    filled = round(progress * width)
    return "█" * filled + "░" * (width - filled)


def check(value: bool) -> str:
    return "X" if value else ""
