# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cosmetic derived values: ages, relative dates and labels."""

import datetime


def capitalized_first_letter(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not text:
        return text
    return text[:1].upper() + text[1:]


def compute_age(
    birthday: datetime.date | None, today: datetime.date | None = None
) -> int | None:
    """Compute whole years between a birthday and today.

    Returns None when no birthday is known.
    """
    if birthday is None:
        return None
    today = today or datetime.date.today()
    years = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        years -= 1
    return years


def _as_date(value: datetime.date | datetime.datetime) -> datetime.date:
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def is_future_or_today(
    moment: datetime.date | datetime.datetime, today: datetime.date | None = None
) -> bool:
    """Check whether a moment falls on today's calendar day or later.

    - True: calendar day of moment >= today
    - False: any earlier calendar day
    """
    today = today or datetime.date.today()
    return _as_date(moment) >= today


def long_date_string(moment: datetime.date | datetime.datetime) -> str:
    """Format as abbreviated month, day and year, e.g. ``Oct 5, 2026``."""
    day = _as_date(moment)
    return f"{day:%b} {day.day}, {day.year}"


def relative_date_string(
    moment: datetime.date | datetime.datetime,
    now: datetime.datetime | None = None,
) -> str:
    """Describe how long ago a moment was.

    Today, Yesterday and "N days ago" within the last week; anything older
    (or in the future) falls back to an upper-cased ``MMM DD, YYYY``.
    """
    now = now or datetime.datetime.now()
    day = _as_date(moment)
    days_ago = (_as_date(now) - day).days

    if days_ago == 0:
        return "Today"
    if days_ago == 1:
        return "Yesterday"
    if 1 < days_ago < 7:
        return f"{days_ago} days ago"
    return f"{day:%b %d, %Y}".upper()
