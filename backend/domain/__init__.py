"""Domain layer for user accounts.

Business rules for sign-up, sign-in and user management,
decoupled from the HTTP/GraphQL surfaces and from persistence.
"""
