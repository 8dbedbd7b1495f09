"""Error types."""


class SourceMoverError(Exception):
    """Base error for source mover."""


class RepoError(SourceMoverError):
    """Remote repository could not be reached or answered badly."""


class ValidationError(SourceMoverError):
    """Request parameters are malformed."""


class IllegalStateError(SourceMoverError, RuntimeError):
    """Operation attempted on a closed resource."""
