"""
Analysis Store - latest resume analysis per user, backed by SQLAlchemy.
"""
from typing import Optional

from fastapi import Depends
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import UserAnalysis


class AnalysisStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, user_id: str, analysis: dict, resume_file_path: Optional[str] = None) -> None:
        """Write the analysis for a user, replacing any earlier one."""
        record = await self.db.get(UserAnalysis, user_id)
        if record is None:
            record = UserAnalysis(user_id=user_id)
            self.db.add(record)

        record.resume_file_path = resume_file_path
        record.analysis = analysis
        record.timestamp = func.now()
        await self.db.commit()

    async def get_analysis(self, user_id: str) -> Optional[dict]:
        """Stored analysis for a user, or None if nothing was saved yet."""
        record = await self.db.get(UserAnalysis, user_id, populate_existing=True)
        if record is None:
            return None
        return record.analysis


async def get_analysis_store(db: AsyncSession = Depends(get_db)) -> AnalysisStore:
    """FastAPI dependency wrapping the request's DB session."""
    return AnalysisStore(db)
