"""
GraphQL schema, loaders and resolvers
"""
