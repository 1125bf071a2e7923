"""
Persistence helpers shared by the services.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from todo_admin.errors import NotFoundError, ValidationError
from todo_admin.extensions import db

logger = logging.getLogger(__name__)


def get_or_raise(model, ident):
    """Load `model` by primary key or raise NotFoundError."""
    record = db.session.get(model, ident)
    if record is None:
        raise NotFoundError(model.__name__, ident)
    return record


def commit(unique_messages=None):
    """Commit the session, rolling back on failure.

    Args:
        unique_messages: column name -> message. A unique-constraint
            violation naming one of these columns is re-raised as a
            ValidationError on that field.
    """
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        detail = str(e.orig)
        for column, message in (unique_messages or {}).items():
            if column in detail:
                logger.info('Unique constraint on %s rejected the write', column)
                raise ValidationError({column: [message]}) from e
        logger.exception('Integrity error on commit: %s', detail)
        raise
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Database error on commit')
        raise
