"""Pytest configuration and fixtures."""

import os
import tempfile

# Settings are read at import time, so the environment has to be in place
# before anything under app/ is imported.
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="styltara-uploads-"))
os.environ.setdefault("MAIL_USER", "studio@styltara.test")
os.environ.setdefault("ADMIN_EMAIL", "ops@styltara.test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("TIMEZONE", "Asia/Kolkata")

from io import BytesIO
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from starlette.datastructures import Headers, UploadFile

from app.dependencies import get_db_ops, get_intake_service, get_upload_dir
from app.main import app
from app.services.intake_service import IntakeService
from app.services.notification_service import NotificationService
from app.utils.auth import create_access_token


def _matches(document: Dict, filter_query: Dict) -> bool:
    return all(document.get(key) == value for key, value in filter_query.items())


class FakeStore:
    """In-memory stand-in for DBOperations"""

    def __init__(self, fail: bool = False):
        self.collections: Dict[str, List[Dict]] = {}
        self.fail = fail

    def docs(self, collection_name: str) -> List[Dict]:
        return self.collections.get(collection_name, [])

    @property
    def total(self) -> int:
        return sum(len(docs) for docs in self.collections.values())

    def seed(self, collection_name: str, document: Dict) -> Dict:
        document.setdefault("_id", ObjectId())
        self.collections.setdefault(collection_name, []).append(document)
        return document

    async def insert_one(self, collection_name: str, document: Dict) -> str:
        if self.fail:
            raise ConnectionError("mongodb://db:27017 unreachable")
        return str(self.seed(collection_name, document)["_id"])

    async def get_one(self, collection_name: str, filter_query: Dict) -> Optional[Dict]:
        for document in self.docs(collection_name):
            if _matches(document, filter_query):
                return document
        return None

    async def get_all(self, collection_name, filter_query=None, sort=None, skip=0, limit=100):
        found = [d for d in self.docs(collection_name) if _matches(d, filter_query or {})]
        for key, direction in reversed(sort or []):
            found.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return [dict(d) for d in found[skip:skip + limit]]

    async def update_one(self, collection_name: str, filter_query: Dict, update_data: Dict) -> int:
        document = await self.get_one(collection_name, filter_query)
        if document is None:
            return 0
        for key, value in update_data.items():
            target = document
            *parents, leaf = key.split(".")
            for part in parents:
                target = target.setdefault(part, {})
            target[leaf] = value
        return 1


class FakeMailer:
    """Records outgoing messages; recipients in fail_for raise like a dead relay"""

    def __init__(self, fail_for=()):
        self.sent = []
        self.attempted = []
        self.fail_for = set(fail_for)

    async def send(self, message) -> None:
        self.attempted.append(message)
        if message["To"] in self.fail_for:
            raise ConnectionError("SMTP relay unavailable")
        self.sent.append(message)


def make_upload(filename: str, data: bytes, content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=BytesIO(data),
        filename=filename,
        size=len(data),
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def notifier(mailer) -> NotificationService:
    return NotificationService(
        mailer=mailer,
        sender="studio@styltara.test",
        admin_address="ops@styltara.test",
    )


@pytest.fixture
def intake_service(store, notifier) -> IntakeService:
    return IntakeService(store=store, notifier=notifier)


@pytest.fixture
def upload_dir(tmp_path) -> str:
    path = tmp_path / "uploads"
    path.mkdir()
    return str(path)


@pytest.fixture
def client(store, intake_service, upload_dir):
    app.dependency_overrides[get_intake_service] = lambda: intake_service
    app.dependency_overrides[get_db_ops] = lambda: store
    app.dependency_overrides[get_upload_dir] = lambda: upload_dir
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    token = create_access_token({"sub": "user-42", "email": "asha@example.com"})
    return {"Authorization": f"Bearer {token}"}
