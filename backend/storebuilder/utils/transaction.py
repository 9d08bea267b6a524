import logging
from contextlib import contextmanager
from storebuilder.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """Commit on success, roll back and re-raise on any error."""
    try:
        yield
        db.session.commit()
    except Exception:
        logger.warning("Rolling back transaction", exc_info=True)
        db.session.rollback()
        raise
