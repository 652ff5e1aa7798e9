import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from services.exceptions import RecordsError

logger = logging.getLogger(__name__)


def atomic_create(on_conflict):
    """
    Run a create as one unit: any failure rolls the session back so the
    store is left exactly as it was and the session stays usable.

    ``on_conflict`` is called with the create's arguments when the database
    itself rejects the row. It returns the RecordsError to raise when the
    rejection was a key or pair collision (a concurrent insert won the
    race), or None to let the original IntegrityError through.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except RecordsError as exc:
                db.session.rollback()
                logger.warning("%s rejected: %s", func.__name__, exc.message)
                raise
            except IntegrityError as exc:
                db.session.rollback()
                error = on_conflict(*args, **kwargs)
                if error is None:
                    logger.error("%s failed on a constraint: %s", func.__name__, exc.orig)
                    raise
                logger.warning(
                    "%s rejected by constraint: %s", func.__name__, error.message
                )
                raise error from exc
            except SQLAlchemyError:
                db.session.rollback()
                logger.exception("%s failed", func.__name__)
                raise
        return wrapper
    return decorator
