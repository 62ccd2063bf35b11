"""
GraphQL layer (strawberry).

Types, document mappers and the Query/Mutation schema served at /graphql.
"""
