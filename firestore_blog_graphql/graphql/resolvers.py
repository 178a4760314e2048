"""
Relationship resolvers.

Each (GraphQL type, field) pair that points at another entity is backed by one
function registered in ``RELATIONSHIP_RESOLVERS``. A resolver receives the
already-resolved parent and performs exactly one store round trip: a point
lookup for a single reference, an equality scan for a back-reference. Nothing
is cached or batched between invocations.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from ..documents import CommentDocument, PostDocument, UserDocument
from ..errors import store_operation

logger = logging.getLogger(__name__)

RelationshipResolver = Callable[[Any], Awaitable[Any]]

RELATIONSHIP_RESOLVERS: Dict[Tuple[str, str], RelationshipResolver] = {}


def relationship(type_name: str, field_name: str):
    """Register the decorated coroutine as the resolver for ``type_name.field_name``."""

    def register(func: RelationshipResolver) -> RelationshipResolver:
        key = (type_name, field_name)
        if key in RELATIONSHIP_RESOLVERS:
            raise ValueError(f"Duplicate relationship resolver for {type_name}.{field_name}")
        RELATIONSHIP_RESOLVERS[key] = func
        return func

    return register


async def resolve_relationship(type_name: str, field_name: str, parent: Any) -> Any:
    resolver = RELATIONSHIP_RESOLVERS[(type_name, field_name)]
    return await resolver(parent)


@relationship("User", "posts")
@store_operation
async def resolve_user_posts(user) -> List[PostDocument]:
    return await PostDocument.find_all([PostDocument.user_id == user.id])


@relationship("Post", "user")
@store_operation
async def resolve_post_user(post) -> Optional[UserDocument]:
    author = await UserDocument.get(post.user_id)
    if author is None:
        logger.debug(f"Post {post.id} references missing user {post.user_id}")
    return author


@relationship("Post", "comments")
@store_operation
async def resolve_post_comments(post) -> List[CommentDocument]:
    return await CommentDocument.find_all([CommentDocument.post_id == post.id])


@relationship("Comment", "user")
@store_operation
async def resolve_comment_user(comment) -> Optional[UserDocument]:
    return await UserDocument.get(comment.user_id)


@relationship("Comment", "post")
@store_operation
async def resolve_comment_post(comment) -> Optional[PostDocument]:
    return await PostDocument.get(comment.post_id)
