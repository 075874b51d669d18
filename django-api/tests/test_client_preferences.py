"""Tests for client storage, preferences, image checks and profile sync.

Run with: pytest tests/test_client_preferences.py -v
"""

import threading
from types import SimpleNamespace

import httpx
import pytest

from fakes import PNG_DATA_URL, client_token
from gatherguru_client.auth import SessionContext
from gatherguru_client.images import MAX_IMAGE_BYTES, process_image_file, process_image_upload, to_data_url
from gatherguru_client.preferences import CurrentBooking, TextSizePreference
from gatherguru_client.profile import ProfileSync
from gatherguru_client.storage import TEXT_SIZE_KEY, JsonFileStorage, MemoryStorage
from gatherguru_client.tokens import TokenStore


class TestTextSize:
    def test_defaults_to_100(self):
        assert TextSizePreference(MemoryStorage()).get() == 100

    def test_steps_are_clamped(self):
        pref = TextSizePreference(MemoryStorage())
        for _ in range(10):
            pref.increase()
        assert pref.get() == 150
        for _ in range(10):
            pref.decrease()
        assert pref.get() == 70
        assert pref.reset() == 100

    def test_persists_as_string(self):
        storage = MemoryStorage()
        TextSizePreference(storage).set(120)
        assert storage.get(TEXT_SIZE_KEY) == "120"
        assert TextSizePreference(storage).get() == 120

    @pytest.mark.parametrize("raw", ["65", "155", "105", "large"])
    def test_bad_stored_value_reads_as_default(self, raw):
        assert TextSizePreference(MemoryStorage({TEXT_SIZE_KEY: raw})).get() == 100

    @pytest.mark.parametrize("size", [60, 160, 95])
    def test_set_rejects_off_scale(self, size):
        with pytest.raises(ValueError):
            TextSizePreference(MemoryStorage()).set(size)


class TestCurrentBooking:
    def test_set_and_clear(self):
        current = CurrentBooking(MemoryStorage())
        assert current.get() is None
        current.set("b1")
        assert current.get() == "b1"
        current.clear()
        assert current.get() is None


class TestJsonFileStorage:
    def test_values_survive_reopen(self, tmp_path):
        path = tmp_path / "state" / "storage.json"
        JsonFileStorage(path).set("token", "abc")
        reopened = JsonFileStorage(path)
        assert reopened.get("token") == "abc"
        reopened.remove("token")
        assert JsonFileStorage(path).get("token") is None

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        storage = JsonFileStorage(path)
        assert storage.get("token") is None
        storage.set("token", "fresh")
        assert storage.get("token") == "fresh"

    def test_backs_a_token_store(self, tmp_path):
        token = client_token()
        TokenStore(JsonFileStorage(tmp_path / "s.json")).save(token)
        session = SessionContext(TokenStore(JsonFileStorage(tmp_path / "s.json")))
        assert session.state.is_authenticated


class TestImages:
    def test_accepts_image(self):
        upload = process_image_upload(b"\x89PNG", "image/png")
        assert upload.ok
        assert upload.data_url == to_data_url(b"\x89PNG", "image/png")
        assert upload.data_url.startswith("data:image/png;base64,")

    def test_rejects_non_image(self):
        assert process_image_upload(b"hello", "text/plain").error == "Please upload an image file"

    def test_rejects_large_image(self):
        upload = process_image_upload(b"\0" * (MAX_IMAGE_BYTES + 1), "image/jpeg")
        assert upload.error == "Image size should be less than 5MB"
        assert upload.data_url is None

    def test_reads_file(self, tmp_path):
        path = tmp_path / "pixel.png"
        path.write_bytes(b"\x89PNG\r\n")
        upload = process_image_file(path)
        assert upload.ok
        assert upload.data_url.startswith("data:image/png;base64,")

    def test_missing_file(self, tmp_path):
        assert process_image_file(tmp_path / "gone.png").error == "Error processing image. Please try again."

    def test_file_with_non_image_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hi")
        assert process_image_file(path).error == "Please upload an image file"


class StubApi:
    """Stands in for GatherGuruApi; ``before_return`` runs inside get_profile."""

    def __init__(self, session: SessionContext, images: list[str]) -> None:
        self.client = SimpleNamespace(session=session)
        self._images = iter(images)
        self.before_return = None

    def get_profile(self) -> dict:
        image = next(self._images)
        hook, self.before_return = self.before_return, None
        if hook:
            hook()
        return {"firstName": "Ada", "profileImage": image}


@pytest.fixture
def session() -> SessionContext:
    tokens = TokenStore(MemoryStorage(), httpx.Cookies())
    tokens.save(client_token())
    return SessionContext(tokens)


class TestProfileSync:
    def test_load_updates_session_image(self, session):
        sync = ProfileSync(StubApi(session, [PNG_DATA_URL]))
        assert sync.load()["firstName"] == "Ada"
        assert session.state.user.profile_image == PNG_DATA_URL

    def test_empty_image_clears_it(self, session):
        session.set_user(profile_image="/old.png")
        ProfileSync(StubApi(session, [""])).load()
        assert session.state.user.profile_image is None

    def test_stale_response_is_dropped(self, session):
        api = StubApi(session, ["/first.png", "/second.png"])
        sync = ProfileSync(api)
        newer = []
        api.before_return = lambda: newer.append(sync.load())
        assert sync.load() is None
        assert newer[0]["profileImage"] == "/second.png"
        assert session.state.user.profile_image == "/second.png"

    def test_cancelled_load_is_dropped(self, session):
        cancel = threading.Event()
        api = StubApi(session, ["/late.png"])
        api.before_return = cancel.set
        assert ProfileSync(api).load(cancel) is None
        assert session.state.user.profile_image is None
