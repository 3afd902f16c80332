import threading

import pytest
from fastapi.testclient import TestClient

from resume_coach.main import app
from resume_coach.services.analysis_store import get_analysis_store
from resume_coach.services.blob_store import get_blob_store
from resume_coach.services.gemini import get_model_client


class FakeModel:
    def __init__(self, reply=""):
        self.reply = reply
        self.error = None
        self.prompts = []
        self.threads = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        self.threads.append(threading.get_ident())
        if self.error:
            raise self.error
        return self.reply


class FakeBlobStore:
    def __init__(self, content=b""):
        self.content = content
        self.downloads = []
        self.threads = []

    def download(self, file_path, destination):
        self.downloads.append((file_path, destination))
        self.threads.append(threading.get_ident())
        with open(destination, "wb") as f:
            f.write(self.content)

    def create_upload_url(self, filename, content_type):
        return {"url": f"https://example.test/{filename}", "filePath": f"uploads/abc_{filename}"}


class FakeAnalysisStore:
    def __init__(self):
        self.documents = {}
        self.saves = []

    async def save(self, user_id, analysis, resume_file_path=None):
        self.saves.append(user_id)
        self.documents[user_id] = {"resumeFilePath": resume_file_path, "analysis": analysis}

    async def get_analysis(self, user_id):
        doc = self.documents.get(user_id)
        return doc["analysis"] if doc else None


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def fake_blob_store():
    return FakeBlobStore()


@pytest.fixture
def fake_store():
    return FakeAnalysisStore()


@pytest.fixture
def client(fake_model, fake_blob_store, fake_store):
    app.dependency_overrides[get_model_client] = lambda: fake_model
    app.dependency_overrides[get_blob_store] = lambda: fake_blob_store
    app.dependency_overrides[get_analysis_store] = lambda: fake_store
    yield TestClient(app)
    app.dependency_overrides.clear()
