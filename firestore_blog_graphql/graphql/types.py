"""
GraphQL object and input types.

Scalar fields mirror the stored documents. Relationship fields are resolved
on demand through ``RELATIONSHIP_RESOLVERS`` and only run when selected.
"""

from typing import List, Optional

import strawberry

from ..documents import CommentDocument, PostDocument, UserDocument
from .resolvers import resolve_relationship


@strawberry.type
class User:
    """A user; owns posts by back-reference."""

    id: strawberry.ID
    email: str
    username: str
    img_url: Optional[str] = None

    @classmethod
    def from_document(cls, document: Optional[UserDocument]) -> Optional["User"]:
        if document is None:
            return None
        return cls(
            id=strawberry.ID(document.id),
            email=document.email,
            username=document.username,
            img_url=document.img_url,
        )

    @strawberry.field
    async def posts(self) -> List["Post"]:
        """Posts whose ``user_id`` is this user."""
        documents = await resolve_relationship("User", "posts", self)
        return [Post.from_document(document) for document in documents]


@strawberry.type
class Post:
    """A post written by ``user_id``."""

    id: strawberry.ID
    title: str
    body: str
    user_id: str

    @classmethod
    def from_document(cls, document: Optional[PostDocument]) -> Optional["Post"]:
        if document is None:
            return None
        return cls(
            id=strawberry.ID(document.id),
            title=document.title,
            body=document.body,
            user_id=document.user_id,
        )

    @strawberry.field
    async def user(self) -> Optional[User]:
        """The author, or null when the user no longer exists."""
        return User.from_document(await resolve_relationship("Post", "user", self))

    @strawberry.field
    async def comments(self) -> List["Comment"]:
        documents = await resolve_relationship("Post", "comments", self)
        return [Comment.from_document(document) for document in documents]


@strawberry.type
class Comment:
    id: strawberry.ID
    body: str
    user_id: str
    post_id: str

    @classmethod
    def from_document(cls, document: Optional[CommentDocument]) -> Optional["Comment"]:
        if document is None:
            return None
        return cls(
            id=strawberry.ID(document.id),
            body=document.body,
            user_id=document.user_id,
            post_id=document.post_id,
        )

    @strawberry.field
    async def user(self) -> Optional[User]:
        return User.from_document(await resolve_relationship("Comment", "user", self))

    @strawberry.field
    async def post(self) -> Optional[Post]:
        return Post.from_document(await resolve_relationship("Comment", "post", self))


@strawberry.input
class UserCreds:
    id: strawberry.ID
    email: str
    username: str
    img_url: Optional[str] = None


@strawberry.input
class PostCreds:
    id: strawberry.ID
    title: str
    body: str
    user_id: str


@strawberry.input
class CommentCreds:
    id: strawberry.ID
    body: str
    user_id: str
    post_id: str


@strawberry.type
class DeleteResponse:
    response: str
