import logging

from sqlalchemy import update

from extensions import db
from models.sequence import Sequence

logger = logging.getLogger(__name__)

STUDENT_SEQUENCE = "student_seq"


def create_sequence(name, start_with=1, increment_by=1):
    """Register a counter whose first ``next_value`` is ``start_with``."""
    existing = db.session.get(Sequence, name)
    if existing:
        return existing

    sequence = Sequence(
        sequence_name=name,
        last_value=start_with - increment_by,
        increment_by=increment_by
    )
    db.session.add(sequence)
    db.session.flush()
    logger.info("Created sequence %s starting at %s", name, start_with)
    return sequence


def next_value(name):
    """
    Advance the counter and return the new value.

    The increment is a single UPDATE so two sessions can never read the
    same value. Runs inside the caller's transaction; a value consumed by a
    rolled back create is handed out again, a committed one never is.
    """
    # The migration seeds student_seq; this only covers schemas built with
    # create_all. Two first uses racing here surface as an IntegrityError.
    if db.session.get(Sequence, name) is None:
        create_sequence(name)

    db.session.execute(
        update(Sequence)
        .where(Sequence.sequence_name == name)
        .values(last_value=Sequence.last_value + Sequence.increment_by)
    )
    return db.session.execute(
        db.select(Sequence.last_value).where(Sequence.sequence_name == name)
    ).scalar_one()
