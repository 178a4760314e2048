from .resolvers import RELATIONSHIP_RESOLVERS
from .schema import (
    build_schema,
    check_relationship_resolvers,
    create_graphql_router,
    schema,
    validate_schema,
)

__all__ = [
    "RELATIONSHIP_RESOLVERS",
    "build_schema",
    "check_relationship_resolvers",
    "create_graphql_router",
    "schema",
    "validate_schema",
]
