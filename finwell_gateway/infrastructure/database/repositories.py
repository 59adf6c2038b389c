"""Data access layer for financial profiles"""

from typing import List, Optional
from sqlalchemy.orm import Session
from finwell_gateway.config import settings
from finwell_gateway.infrastructure.database.models import FinancialProfileRecord
from finwell_gateway.domain.exceptions import InvalidProfileDataError
from finwell_gateway.domain.models import FinancialProfile
from finwell_gateway.utils.date_utils import fixed_offset_timestamp


class ProfileRepository:
    """Repository for stored financial profiles"""

    def __init__(self, db: Session):
        self.db = db

    def create_profile(
        self,
        profile: FinancialProfile,
        source: str = "submitted",
        created_at: str | None = None,
    ) -> FinancialProfileRecord:
        """Persist a profile; the database allocates the id"""
        db_profile = FinancialProfileRecord(
            name=profile.name,
            source=source,
            document=profile.to_document(),
            created_at=created_at or fixed_offset_timestamp(settings.timezone_offset_hours),
        )
        self.db.add(db_profile)
        self.db.flush()  # Get ID without committing
        return db_profile

    def list_profiles(self) -> List[FinancialProfileRecord]:
        """All profiles in insertion order"""
        return self.db.query(FinancialProfileRecord).order_by(FinancialProfileRecord.id).all()

    def find_most_recent(self) -> Optional[FinancialProfileRecord]:
        """Latest profile by created_at; the higher id wins identical timestamps"""
        return (
            self.db.query(FinancialProfileRecord)
            .order_by(FinancialProfileRecord.created_at.desc(), FinancialProfileRecord.id.desc())
            .first()
        )

    def delete_profile(self, profile_id: int) -> bool:
        deleted = (
            self.db.query(FinancialProfileRecord)
            .filter(FinancialProfileRecord.id == profile_id)
            .delete()
        )
        return deleted > 0

    @staticmethod
    def to_domain(record: FinancialProfileRecord) -> FinancialProfile:
        """Rebuild the domain profile from a stored record"""
        try:
            return FinancialProfile.from_document(
                record.document, profile_id=record.id, created_at=record.created_at
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise InvalidProfileDataError(f"Stored profile {record.id} is malformed: {e}") from e
