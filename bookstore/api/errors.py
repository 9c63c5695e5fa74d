"""
Translation of service errors into HTTP responses
"""
import logging
from contextlib import contextmanager

from fastapi import HTTPException
from psycopg2 import errors as pg_errors

from bookstore.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def service_errors(action: str):
    """
    Map domain errors raised inside the block to HTTPException

    - NotFoundError           -> 404
    - ValidationError         -> 422 (same detail shape as request validation)
    - ForeignKeyViolation     -> 409 (row still referenced by orders)
    - anything else           -> 500

    Args:
        action: Short description used in the 500 detail, e.g. "fetching books"
    """
    try:
        yield
    except HTTPException:
        raise
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_detail())
    except pg_errors.ForeignKeyViolation as e:
        logger.warning(f"Foreign key violation while {action}: {e}")
        raise HTTPException(
            status_code=409,
            detail="The record is still referenced by existing orders"
        )
    except Exception as e:
        logger.exception(f"Error {action}")
        raise HTTPException(status_code=500, detail=f"Error {action}: {str(e)}")
