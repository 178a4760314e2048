"""
Root Query/Mutation types and the Strawberry schema.
"""

import dataclasses
import logging
from typing import Iterable, List, Optional, Sequence, Type

import strawberry
from graphql import GraphQLSchema, get_named_type, is_object_type
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import SchemaExtension
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..documents import CommentDocument, PostDocument, UserDocument
from .handlers import delete_document, get_document, list_documents, put_document
from .resolvers import RELATIONSHIP_RESOLVERS
from .types import (
    Comment,
    CommentCreds,
    DeleteResponse,
    Post,
    PostCreds,
    User,
    UserCreds,
)

logger = logging.getLogger(__name__)

ENTITY_TYPES = ("User", "Post", "Comment")


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, id: str) -> Optional[User]:
        return User.from_document(await get_document(UserDocument, id))

    @strawberry.field
    async def users(self) -> List[User]:
        return [User.from_document(document) for document in await list_documents(UserDocument)]

    @strawberry.field
    async def post(self, id: str) -> Optional[Post]:
        return Post.from_document(await get_document(PostDocument, id))

    @strawberry.field
    async def posts(self) -> List[Post]:
        return [Post.from_document(document) for document in await list_documents(PostDocument)]

    @strawberry.field
    async def comment(self, id: str) -> Optional[Comment]:
        return Comment.from_document(await get_document(CommentDocument, id))

    @strawberry.field
    async def comments(self) -> List[Comment]:
        return [
            Comment.from_document(document)
            for document in await list_documents(CommentDocument)
        ]


@strawberry.type
class Mutation:
    """Root GraphQL mutation type. Add and update are both full overwrites."""

    @strawberry.mutation(name="addUser")
    async def add_user(self, creds: UserCreds) -> User:
        return User.from_document(await put_document(UserDocument, dataclasses.asdict(creds)))

    @strawberry.mutation(name="addPost")
    async def add_post(self, creds: PostCreds) -> Post:
        return Post.from_document(await put_document(PostDocument, dataclasses.asdict(creds)))

    @strawberry.mutation(name="addComment")
    async def add_comment(self, creds: CommentCreds) -> Comment:
        return Comment.from_document(
            await put_document(CommentDocument, dataclasses.asdict(creds))
        )

    @strawberry.mutation(name="updateUser")
    async def update_user(self, creds: UserCreds) -> User:
        return User.from_document(await put_document(UserDocument, dataclasses.asdict(creds)))

    @strawberry.mutation(name="updatePost")
    async def update_post(self, creds: PostCreds) -> Post:
        return Post.from_document(await put_document(PostDocument, dataclasses.asdict(creds)))

    @strawberry.mutation(name="updateComment")
    async def update_comment(self, creds: CommentCreds) -> Comment:
        return Comment.from_document(
            await put_document(CommentDocument, dataclasses.asdict(creds))
        )

    # Deletes take ID! while the lookups above take String!; both are part of the public SDL
    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, id: strawberry.ID) -> DeleteResponse:
        return DeleteResponse(response=await delete_document(UserDocument, id))

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, id: strawberry.ID) -> DeleteResponse:
        return DeleteResponse(response=await delete_document(PostDocument, id))

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, id: strawberry.ID) -> DeleteResponse:
        return DeleteResponse(response=await delete_document(CommentDocument, id))


def build_schema(extensions: Sequence[Type[SchemaExtension]] = ()) -> strawberry.Schema:
    """Build the schema; field names are kept exactly as declared."""
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        config=StrawberryConfig(auto_camel_case=False),
        extensions=list(extensions),
    )


schema = build_schema()


def check_relationship_resolvers(
    graphql_schema: GraphQLSchema, type_names: Iterable[str] = ENTITY_TYPES
) -> None:
    """Verify that every object-typed field of the entity types has exactly
    one registered relationship resolver and that no resolver is orphaned.

    Raises:
        RuntimeError: On any mismatch between the schema and the table.
    """
    declared = set()
    for type_name in type_names:
        object_type = graphql_schema.get_type(type_name)
        if object_type is None or not is_object_type(object_type):
            raise RuntimeError(f"Entity type {type_name} is missing from the schema")
        for field_name, field in object_type.fields.items():
            if is_object_type(get_named_type(field.type)):
                declared.add((type_name, field_name))

    registered = set(RELATIONSHIP_RESOLVERS)
    missing = sorted(declared - registered)
    orphaned = sorted(registered - declared)
    if missing or orphaned:
        raise RuntimeError(
            "Relationship resolver table does not match the schema: "
            f"missing={missing} orphaned={orphaned}"
        )
    logger.info(f"Relationship resolvers verified: {len(registered)} fields")


def validate_schema(strawberry_schema: strawberry.Schema = schema) -> None:
    """Validate the GraphQL schema at startup.

    Checks the schema structure, runs an introspection query and verifies the
    relationship resolver table so that a broken schema fails the process
    before it starts serving.

    Raises:
        Exception: If the schema is invalid or does not match the resolvers
    """
    graphql_schema = strawberry_schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    check_relationship_resolvers(graphql_schema)
    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    strawberry_schema: strawberry.Schema = schema, path: str = "/"
) -> GraphQLRouter:
    """Create the GraphQL router for FastAPI."""
    return GraphQLRouter(
        strawberry_schema,
        path=path,
        graphql_ide="graphiql",
    )
