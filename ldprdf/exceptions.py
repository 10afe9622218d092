"""
Repository error types.

Contexts recover from AccessDeniedError and NodeNotFoundError one value at a
time; every other RepositoryError aborts the representation build.
"""


class RepositoryError(Exception):
    """Fatal failure of the underlying node store."""


class AccessDeniedError(RepositoryError):
    """The current user may not read the requested node."""

    def __init__(self, node_id: str, user_id: str | None = None):
        self.node_id = node_id
        self.user_id = user_id
        super().__init__(f"Access denied to {node_id} for user {user_id}")


class NodeNotFoundError(RepositoryError):
    """No node exists for the given identity or URI."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Node not found: {identifier}")


class InconsistentNodeError(RepositoryError):
    """Stored type information contradicts itself."""
