"""
Stored shape of the three collections.

Relationships are plain foreign-key strings; the store enforces none of them
and nothing is ever embedded.
"""

from typing import Optional

from .enums import Collections
from .firestore_model import BaseFirestoreModel


class UserDocument(BaseFirestoreModel):
    class Settings:
        name = Collections.USERS
        label = "User"

    email: str
    username: str
    img_url: Optional[str] = None


class PostDocument(BaseFirestoreModel):
    class Settings:
        name = Collections.POSTS
        label = "Post"

    title: str
    body: str
    user_id: str


class CommentDocument(BaseFirestoreModel):
    class Settings:
        name = Collections.COMMENTS
        label = "Comment"

    body: str
    user_id: str
    post_id: str


DOCUMENT_MODELS = [UserDocument, PostDocument, CommentDocument]
