from fastapi import HTTPException

from eventfinder.core.exceptions import (
    BusinessRuleError,
    NotFoundError,
    ServiceError,
    ValidationError,
)


def http_error_from_service(err: ServiceError) -> HTTPException:
    if isinstance(err, NotFoundError):
        status = 404
    elif isinstance(err, BusinessRuleError):
        status = 400
    elif isinstance(err, ValidationError):
        status = 422
    else:
        status = 500

    return HTTPException(
        status_code=status,
        detail={"code": err.code, "message": err.message},
    )
