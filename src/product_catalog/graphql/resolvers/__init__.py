"""Resolver package for the GraphQL schema.

Resolvers take ``strawberry.Info`` plus the field arguments and delegate to
the ``ProductStore`` found in ``info.context["store"]``.
"""
