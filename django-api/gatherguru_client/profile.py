"""Profile loading that refreshes the session user.

Each load takes a sequence number; a response is applied only if no newer
load has started and the caller has not cancelled.
"""

import itertools
import logging
import threading

from gatherguru_client.api import GatherGuruApi

logger = logging.getLogger(__name__)


class ProfileSync:
    def __init__(self, api: GatherGuruApi) -> None:
        self._api = api
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._latest = 0

    def _begin(self) -> int:
        with self._lock:
            self._latest = next(self._counter)
            return self._latest

    def _is_current(self, seq: int) -> bool:
        with self._lock:
            return seq == self._latest

    def load(self, cancel: threading.Event | None = None) -> dict | None:
        """Fetch the profile and merge it into the session user.

        Returns None when the result was dropped as stale or cancelled.
        """
        seq = self._begin()
        profile = self._api.get_profile()
        if (cancel is not None and cancel.is_set()) or not self._is_current(seq):
            logger.debug("Dropping stale profile response %d", seq)
            return None
        self._api.client.session.set_user(profile_image=profile.get("profileImage") or None)
        return profile
