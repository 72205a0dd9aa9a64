"""GraphQL schema for the users backend.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.resolvers.user.mutations import UserMutations
from graphql_api.resolvers.user.queries import UserQueries


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="User queries")  # type: ignore[misc]
    def user(self) -> UserQueries:
        return UserQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Authentication and user management")  # type: ignore[misc]
    def user(self) -> UserMutations:
        return UserMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the user resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
