"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from nutritrack.domain.entities import MutationResult


def ensure_applied(result: MutationResult, detail: str) -> None:
    """Translate a no-op mutation into a 404 response."""

    if result is MutationResult.NOOP:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
