"""Mention index: the profile directory cache behind @-mention autocomplete."""

import asyncio
from typing import Sequence

import logfire

from graphreview.adapter.error import BackendError
from graphreview.domain.model import UserIdentity
from graphreview.domain.service.mention import filter_identities, find_mentioned_users

from .backend import CommentBackend


class MentionIndex:
    """Loads the profile directory once and answers mention lookups.

    One instance is meant to be shared by every comment section on a page.
    Concurrent ``load()`` calls wait on a single fetch. A failed fetch leaves
    the index empty and the next ``load()`` tries again; posting never
    depends on the index being loaded.
    """

    def __init__(self, backend: CommentBackend) -> None:
        self._backend = backend
        self._users: list[UserIdentity] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def users(self) -> list[UserIdentity]:
        return list(self._users)

    async def load(self) -> list[UserIdentity]:
        """Fetch the directory unless it is already cached.

        Returns:
            Cached users, empty if the fetch failed
        """
        if self._loaded:
            return self.users

        async with self._lock:
            # Another caller may have finished the fetch while we waited
            if self._loaded:
                return self.users

            with logfire.span("mention_index.load"):
                try:
                    users = await self._backend.list_user_profiles()
                except BackendError as e:
                    logfire.error("Failed to load profile directory", error=str(e))
                    return []

                self._users = list(users)
                self._loaded = True
                logfire.info("Profile directory loaded", count=len(self._users))
                return self.users

    def filter(self, query: str) -> list[UserIdentity]:
        """Users whose name or email contains ``query``, ignoring case."""
        return filter_identities(self._users, query)

    def mentioned_in(self, content: str) -> list[UserIdentity]:
        """Users mentioned in ``content``, deduplicated by user ID."""
        return find_mentioned_users(content, self._users)

    def invalidate(self) -> None:
        """Drop the cache so the next ``load()`` fetches again."""
        self._users = []
        self._loaded = False

    def seed(self, users: Sequence[UserIdentity]) -> None:
        """Fill the cache without a fetch, e.g. from server-rendered data."""
        self._users = list(users)
        self._loaded = True
