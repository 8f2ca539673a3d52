"""Resolver package — one async function per GraphQL operation.

Query resolvers live in task_queries, mutation resolvers in task_mutations.
"""
