"""Persisted UI preferences and transient checkout state."""

from gatherguru_client.storage import CURRENT_BOOKING_KEY, TEXT_SIZE_KEY, Storage

MIN_TEXT_SIZE = 70
MAX_TEXT_SIZE = 150
TEXT_SIZE_STEP = 10
DEFAULT_TEXT_SIZE = 100


class TextSizePreference:
    """Text size as a percentage; stored values outside the scale read as default."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    @staticmethod
    def is_valid(size: int) -> bool:
        return MIN_TEXT_SIZE <= size <= MAX_TEXT_SIZE and size % TEXT_SIZE_STEP == 0

    def get(self) -> int:
        raw = self._storage.get(TEXT_SIZE_KEY)
        try:
            size = int(raw) if raw is not None else DEFAULT_TEXT_SIZE
        except ValueError:
            return DEFAULT_TEXT_SIZE
        return size if self.is_valid(size) else DEFAULT_TEXT_SIZE

    def set(self, size: int) -> int:
        if not self.is_valid(size):
            raise ValueError(
                f"Text size must be between {MIN_TEXT_SIZE} and {MAX_TEXT_SIZE} in steps of {TEXT_SIZE_STEP}"
            )
        self._storage.set(TEXT_SIZE_KEY, str(size))
        return size

    def increase(self) -> int:
        return self.set(min(self.get() + TEXT_SIZE_STEP, MAX_TEXT_SIZE))

    def decrease(self) -> int:
        return self.set(max(self.get() - TEXT_SIZE_STEP, MIN_TEXT_SIZE))

    def reset(self) -> int:
        return self.set(DEFAULT_TEXT_SIZE)


class CurrentBooking:
    """The booking being paid for; cleared once payment is confirmed."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def get(self) -> str | None:
        return self._storage.get(CURRENT_BOOKING_KEY)

    def set(self, booking_id: str) -> None:
        self._storage.set(CURRENT_BOOKING_KEY, booking_id)

    def clear(self) -> None:
        self._storage.remove(CURRENT_BOOKING_KEY)
