# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Roster: track prospects, roster members and the dates you go on."""

__version__ = "0.1.0"
