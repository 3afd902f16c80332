"""
User Analysis Model - Latest resume analysis stored per user.
"""
from sqlalchemy import Column, String, DateTime, JSON, func
from ..database import Base

MAX_USER_ID_LENGTH = 255
MAX_FILE_PATH_LENGTH = 1024


class UserAnalysis(Base):
    """
    One document per user identifier.
    Every write replaces the previous analysis (last write wins).
    """
    __tablename__ = "user_analyses"

    user_id = Column(String(MAX_USER_ID_LENGTH), primary_key=True)

    # Blob key of the uploaded resume, None for pasted text
    resume_file_path = Column(String(MAX_FILE_PATH_LENGTH), nullable=True)
    analysis = Column(JSON, nullable=False, default=dict)

    # Set by the database on every write
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
