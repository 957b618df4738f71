# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from keepsake.model.book import BOOK_STATUSES, Book, BookStatus
from keepsake.model.filter import Filters, MultiPropertyFilter, PropertyFilter
from keepsake.query.filter import apply_filters
from keepsake.query.filter_type import FilterType
from keepsake.query.sort import sort_items
from keepsake.service.statistics import (
    average,
    count_in_window,
    goal_progress,
    most_recent,
    percentage,
)
from keepsake.time import DateWindow, in_window


class RatingBucket(StrEnum):
    ALL = "all"
    HIGH = "high"  # 8 and above
    MEDIUM = "medium"  # 5 to 7
    LOW = "low"  # below 5


class CompletionPeriod(StrEnum):
    ALL = "all"
    THIS_MONTH = "this_month"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"


class BookSort(StrEnum):
    RECENT = "recent"
    TITLE = "title"
    AUTHOR = "author"
    RATING = "rating"
    COMPLETED = "completed"


BOOK_SORT_INSTRUCTIONS: dict[BookSort, list[str]] = {
    BookSort.RECENT: ["desc updated"],
    BookSort.TITLE: ["title"],
    BookSort.AUTHOR: ["author", "title"],
    BookSort.RATING: ["desc state.rating", "title"],
    BookSort.COMPLETED: ["desc state.completed"],
}

RATING_BUCKET_FILTERS: dict[RatingBucket, str] = {
    RatingBucket.ALL: "all",
    RatingBucket.HIGH: "gte 8",
    RatingBucket.MEDIUM: "between 5 8",
    RatingBucket.LOW: "lt 5",
}


class LibraryStatistics(TypedDict):
    total: int
    want_to_read: int
    reading: int
    completed: int
    want_to_read_percentage: int
    reading_percentage: int
    completed_percentage: int
    completed_this_month: int
    completed_this_year: int
    yearly_goal: int
    yearly_goal_progress: float
    monthly_goal: int
    monthly_goal_progress: float
    average_rating: Optional[float]
    recent_activity: list[Book]


def status_filter(status: BookStatus) -> PropertyFilter:
    return {
        "filter_type": FilterType.STR,
        "property": "state.status",
        "filter": f"equals {status}",
    }


def rating_filter(bucket: RatingBucket) -> PropertyFilter:
    return {
        "filter_type": FilterType.NUM,
        "property": "state.rating",
        "filter": RATING_BUCKET_FILTERS[bucket],
    }


def completion_period_filter(period: CompletionPeriod) -> PropertyFilter:
    return {
        "filter_type": FilterType.DATE,
        "property": "state.completed",
        "filter": f"in {period.value}",
    }


def book_search_filter(query: str) -> MultiPropertyFilter:
    return {
        "filter_type": FilterType.SEARCH,
        "properties": ["title", "author", "notes"],
        "filter": query,
    }


def filter_books(
    books: list[Book],
    status: Optional[BookStatus] = None,
    rating: RatingBucket = RatingBucket.ALL,
    period: CompletionPeriod = CompletionPeriod.ALL,
    query: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[Book]:
    """
    Narrow a book list down with every active filter at once.

    A rating or period other than "all" only keeps completed books, since
    only they carry a rating and a completion date.
    """
    filters: list[Filters] = []
    if status is not None:
        filters.append(status_filter(status))
    if rating != RatingBucket.ALL:
        filters.append(rating_filter(rating))
    if period != CompletionPeriod.ALL:
        filters.append(completion_period_filter(period))
    if query is not None:
        filters.append(book_search_filter(query))
    return apply_filters(books, filters, now)


def sort_books(books: list[Book], sort: BookSort = BookSort.RECENT) -> list[Book]:
    return sort_items(books, BOOK_SORT_INSTRUCTIONS[sort])


def reading_history(
    books: list[Book],
    rating: RatingBucket = RatingBucket.ALL,
    period: CompletionPeriod = CompletionPeriod.ALL,
    query: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> list[Book]:
    """Completed books, most recently completed first."""
    completed_books = filter_books(books, "completed", rating, period, query, now)
    return sort_books(completed_books, BookSort.COMPLETED)


def reading_progress(book: Book) -> Optional[int]:
    """Percentage of pages read, when the book is being read and both counts are known."""
    state = book["state"]
    if state["status"] != "reading":
        return None
    if state["current_page"] is None or state["total_pages"] is None:
        return None
    return percentage(state["current_page"], state["total_pages"])


def library_statistics(
    books: list[Book],
    yearly_goal: int = 12,
    monthly_goal: int = 1,
    period: DateWindow = DateWindow.ALL,
    recent_limit: int = 5,
    now: Optional[pendulum.DateTime] = None,
) -> LibraryStatistics:
    """
    Summarize the library.

    Args:
        books: All books
        yearly_goal: Books to complete per calendar year
        monthly_goal: Books to complete per calendar month
        period: Only count books added in this window for the per status
            totals and percentages
        recent_limit: Number of books in the recent activity list
        now: Reference time, defaults to the current time

    Returns:
        LibraryStatistics
    """
    period_books = [book for book in books if in_window(book["created"], period, now)]
    per_status = {
        status: len([book for book in period_books if book["state"]["status"] == status])
        for status in BOOK_STATUSES
    }
    total = len(period_books)

    completed_books = [book for book in books if book["state"]["status"] == "completed"]
    completed_this_month = count_in_window(
        completed_books, "state.completed", DateWindow.THIS_MONTH, now
    )
    completed_this_year = count_in_window(
        completed_books, "state.completed", DateWindow.THIS_YEAR, now
    )

    return {
        "total": total,
        "want_to_read": per_status["want_to_read"],
        "reading": per_status["reading"],
        "completed": per_status["completed"],
        "want_to_read_percentage": percentage(per_status["want_to_read"], total),
        "reading_percentage": percentage(per_status["reading"], total),
        "completed_percentage": percentage(per_status["completed"], total),
        "completed_this_month": completed_this_month,
        "completed_this_year": completed_this_year,
        "yearly_goal": yearly_goal,
        "yearly_goal_progress": goal_progress(completed_this_year, yearly_goal),
        "monthly_goal": monthly_goal,
        "monthly_goal_progress": goal_progress(completed_this_month, monthly_goal),
        "average_rating": average(
            book["state"]["rating"]
            for book in completed_books
            if book["state"]["status"] == "completed"
        ),
        "recent_activity": most_recent(books, "updated", recent_limit),
    }
