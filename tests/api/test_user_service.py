"""Tests for pagination helpers."""

from __future__ import annotations

import pytest

from roster_backend.api.services import UserService, parse_positive_int
from roster_backend.store import UserStore


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 7), ("", 7), ("  ", 7), ("3", 3), ("0", 1), ("-2", 1), ("1.5", 7), ("x", 7)],
)
def test_parse_positive_int(raw: str | None, expected: int) -> None:
    assert parse_positive_int(raw, 7) == expected


def test_list_page_counts_filtered_users_only() -> None:
    store = UserStore()
    store.seed_demo_users()
    for index in range(3):
        store.insert(f"Jane {index}", f"jane{index}@example.com")

    result = UserService(store).list_page(page=2, limit=3, search="jane")

    assert result.total == 4
    assert result.pages == 2
    assert [user.name for user in result.users] == ["Jane 2"]


def test_list_page_rejects_non_positive_values() -> None:
    with pytest.raises(ValueError):
        UserService(UserStore()).list_page(page=0)
