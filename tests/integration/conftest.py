"""
Fixtures for integration tests against the Firestore emulator.

Enabled by ``FIRESTORE_EMULATOR_HOST=localhost:8080``; every test in this
directory is skipped when it is unset.
"""

import os

import pytest
import pytest_asyncio
import httpx

from firestore_blog_graphql import DOCUMENT_MODELS, FirestoreDB, init_firestore_odm

EMULATOR_HOST = os.environ.get("FIRESTORE_EMULATOR_HOST", "").strip()
DATABASE = os.environ.get("DATABASE", None) or None
PROJECT_ID = os.environ.get("GOOGLE_CLOUD_PROJECT") or "test-project"

@pytest.fixture()
def firestore_db():
    """Function-scoped so each test gets an AsyncClient bound to its event loop."""
    return FirestoreDB(project_id=PROJECT_ID, database=DATABASE, emulator_host=EMULATOR_HOST)

@pytest.fixture()
def raw_client(firestore_db):
    return firestore_db.client

@pytest_asyncio.fixture(autouse=True)
async def clean_firestore():
    """Wipe the emulator before and after each test."""
    await _wipe_emulator()
    yield
    await _wipe_emulator()

async def _wipe_emulator():
    db_name = DATABASE or "(default)"
    url = (
        f"http://{EMULATOR_HOST}/emulator/v1/projects/"
        f"{PROJECT_ID}/databases/{db_name}/documents"
    )
    async with httpx.AsyncClient() as client:
        await client.delete(url)

@pytest_asyncio.fixture
async def initialized_models(firestore_db):
    init_firestore_odm(firestore_db, DOCUMENT_MODELS)
    yield {cls.__name__: cls for cls in DOCUMENT_MODELS}
    await firestore_db.close()
