"""
Integration tests: GraphQL operations against the Firestore emulator,
cross-checked with the raw SDK.
"""

import os

import pytest

from firestore_blog_graphql.graphql import schema

pytestmark = [
    pytest.mark.asyncio,
    pytest.mark.skipif(
        not os.environ.get("FIRESTORE_EMULATOR_HOST", "").strip(),
        reason="FIRESTORE_EMULATOR_HOST is not set",
    ),
]


async def execute(query, **variables):
    result = await schema.execute(query, variable_values=variables or None)
    return result


ADD_USER = """
mutation AddUser($creds: UserCreds!) {
    addUser(creds: $creds) { id email username img_url }
}
"""


async def test_add_user_writes_document(initialized_models, raw_client):
    result = await execute(
        ADD_USER, creds={"id": "u1", "email": "a@b.com", "username": "alice"}
    )
    assert result.errors is None

    doc = await raw_client.collection("users").document("u1").get()
    assert doc.exists
    assert doc.to_dict() == {"email": "a@b.com", "username": "alice", "img_url": None}


async def test_update_clears_omitted_field(initialized_models, raw_client):
    await execute(
        ADD_USER,
        creds={"id": "u1", "email": "a@b.com", "username": "alice", "img_url": "http://x"},
    )

    result = await execute(
        """
        mutation Update($creds: UserCreds!) { updateUser(creds: $creds) { img_url } }
        """,
        creds={"id": "u1", "email": "a@b.com", "username": "alice"},
    )

    assert result.data == {"updateUser": {"img_url": None}}
    doc = await raw_client.collection("users").document("u1").get()
    assert doc.to_dict()["img_url"] is None


async def test_relationships_round_trip(initialized_models):
    await execute(ADD_USER, creds={"id": "u1", "email": "a@b.com", "username": "alice"})
    await execute(
        'mutation { addPost(creds: {id: "p1", title: "T", body: "B", user_id: "u1"}) { id } }'
    )
    await execute(
        'mutation { addComment(creds: {id: "c1", body: "hi", user_id: "u1", post_id: "p1"})'
        " { id } }"
    )

    result = await execute(
        '{ post(id: "p1") { title user { username } comments { post { title } } } }'
    )

    assert result.errors is None
    assert result.data == {
        "post": {
            "title": "T",
            "user": {"username": "alice"},
            "comments": [{"post": {"title": "T"}}],
        }
    }


async def test_delete_missing_and_not_found(initialized_models):
    deleted = await execute('mutation { deleteUser(id: "ghost") { response } }')
    missing = await execute('{ user(id: "ghost") { id } }')

    assert deleted.data == {"deleteUser": {"response": "User with ID: ghost has been deleted."}}
    assert missing.data == {"user": None}
    assert missing.errors[0].extensions["code"] == "NOT_FOUND"
