"""SQLAlchemy-backed profile store."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from profile_service.entities import Profile
from profile_service.errors import StorageError
from profile_service.logging import get_logger
from profile_service.models import ProfileRecord

from .base import ProfileStore

logger = get_logger("store.sql")


class SqlProfileStore(ProfileStore):
    """
    ProfileStore over a SQLAlchemy session.

    Writes are committed before returning, so a successful upsert is
    durable. The username primary key makes insert_if_absent atomic:
    a concurrent insert of the same username fails with IntegrityError.

    Usage:
        with db.session() as session:
            store = SqlProfileStore(session)
            store.upsert(Profile("foobar", "Foo", "Bar"))
    """

    supports_atomic_insert = True

    def __init__(self, session: Session):
        self.session = session

    def get(self, username: str) -> Profile | None:
        try:
            record = self.session.get(ProfileRecord, username)
        except SQLAlchemyError as e:
            raise self._storage_error("get", e) from e
        return record.to_entity() if record is not None else None

    def upsert(self, profile: Profile) -> None:
        try:
            record = self.session.get(ProfileRecord, profile.username)
            if record is None:
                self.session.add(ProfileRecord.from_entity(profile))
            else:
                record.first_name = profile.first_name
                record.last_name = profile.last_name
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise self._storage_error("upsert", e) from e

    def insert_if_absent(self, profile: Profile) -> bool:
        try:
            if self.session.get(ProfileRecord, profile.username) is not None:
                return False
            self.session.add(ProfileRecord.from_entity(profile))
            self.session.commit()
        except IntegrityError:
            # Another transaction inserted the same username first
            self.session.rollback()
            logger.info("profile_insert_lost_race", username=profile.username)
            return False
        except SQLAlchemyError as e:
            self.session.rollback()
            raise self._storage_error("insert_if_absent", e) from e
        return True

    @staticmethod
    def _storage_error(operation: str, error: SQLAlchemyError) -> StorageError:
        logger.error(
            "profile_store_error",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        return StorageError(f"Profile store {operation} failed: {error}", operation=operation)
