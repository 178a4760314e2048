"""
Tests to verify the document models raise no Pydantic deprecation warnings.
"""
import warnings

from firestore_blog_graphql import BaseFirestoreModel, UserDocument


def _pydantic_warnings(caught):
    return [
        w for w in caught
        if "pydantic" in str(w.filename).lower()
        or "pydantic" in str(w.message).lower()
        or "Config" in str(w.message)
    ]


def test_model_definition_no_config_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DeprecationWarning)

        class TestModel(BaseFirestoreModel):
            class Settings:
                name = "test_collection"

            name: str

    assert _pydantic_warnings(caught) == []


def test_model_dump_no_warnings():
    user = UserDocument(id="u1", email="a@b.com", username="alice")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DeprecationWarning)
        data = user.model_dump(exclude={"id"})

    assert data == {"email": "a@b.com", "username": "alice", "img_url": None}
    assert _pydantic_warnings(caught) == []
