"""Read-only lookups backing program/application/milestone scope checks."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.infrastructure.models import ApplicationModel, MilestoneModel, ProgramModel


@dataclass(frozen=True)
class ScopeOwners:
    """User ids attached to an entity chain, read in a single statement."""

    creator_id: int | None
    validator_id: int | None
    applicant_id: int | None = None


class AccessRepository:
    """Resolve ownership chains with one joined ``SELECT`` per lookup.

    Each method returns ``None`` when any row on the chain is missing.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def program_owners(self, program_id: int) -> ScopeOwners | None:
        row = self.session.execute(
            select(ProgramModel.creator_id, ProgramModel.validator_id).where(
                ProgramModel.id == program_id
            )
        ).first()
        if row is None:
            return None
        return ScopeOwners(creator_id=row.creator_id, validator_id=row.validator_id)

    def application_owners(self, application_id: int) -> ScopeOwners | None:
        row = self.session.execute(
            select(
                ApplicationModel.applicant_id,
                ProgramModel.creator_id,
                ProgramModel.validator_id,
            )
            .join(ProgramModel, ProgramModel.id == ApplicationModel.program_id)
            .where(ApplicationModel.id == application_id)
        ).first()
        if row is None:
            return None
        return ScopeOwners(
            creator_id=row.creator_id,
            validator_id=row.validator_id,
            applicant_id=row.applicant_id,
        )

    def milestone_owners(self, milestone_id: int) -> ScopeOwners | None:
        row = self.session.execute(
            select(
                ApplicationModel.applicant_id,
                ProgramModel.creator_id,
                ProgramModel.validator_id,
            )
            .select_from(MilestoneModel)
            .join(ApplicationModel, ApplicationModel.id == MilestoneModel.application_id)
            .join(ProgramModel, ProgramModel.id == ApplicationModel.program_id)
            .where(MilestoneModel.id == milestone_id)
        ).first()
        if row is None:
            return None
        return ScopeOwners(
            creator_id=row.creator_id,
            validator_id=row.validator_id,
            applicant_id=row.applicant_id,
        )


__all__ = ["AccessRepository", "ScopeOwners"]
