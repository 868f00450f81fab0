"""Resolver package for the GraphQL schema.

Types, queries and mutations import these lazily to avoid circular imports
between the type modules.
"""
