"""
Translate refused engine operations into HTTP errors.
"""

from fastapi import HTTPException

from bookkeeping.models.enums import ErrorKind
from bookkeeping.models.results import OperationResult


ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_TRANSACTION: 409,
    ErrorKind.UNBALANCED_ENTRY: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NOTHING_TO_CLOSE: 400,
    # Over HTTP the only way to reach this is an unknown account id
    ErrorKind.ENGINE_FAILURE: 422,
}


def raise_for_result(result: OperationResult) -> None:
    """Raise an HTTPException if the operation was refused."""
    if result.success:
        return
    raise HTTPException(
        status_code=ERROR_STATUS_CODES[result.error],
        detail={"error": result.error.value, "message": result.message},
    )
