"""
Seed script to store a sample resume analysis for the demo user
Run with: python -m seed_sample_analysis
"""
import asyncio
from resume_coach.database import async_session_maker, init_db
from resume_coach.services.analysis_store import AnalysisStore

DEMO_USER_ID = "demo_user_001"

SAMPLE_ANALYSIS = {
    "overallScore": 85,
    "skills": [
        {"name": "React", "level": "Advanced", "category": "Technical"},
        {"name": "Node.js", "level": "Advanced", "category": "Technical"}
    ],
    "experienceLevel": "Senior",
    "strengths": ["Strong technical skills", "Leadership"],
    "weaknesses": ["Needs more DevOps experience"],
    "suggestions": [
        {
            "category": "Skills",
            "priority": "High",
            "suggestion": "Learn Docker and Kubernetes",
            "impact": "Will improve job match by 20%"
        }
    ],
    "job_roles": [
        {"title": "Senior Full-Stack Engineer", "reasoning": "Strong in both frontend and backend."}
    ],
    "keywordDensity": {"react": 5, "nodejs": 3},
    "atsCompatibility": 90
}


async def seed_sample_analysis():
    await init_db()

    async with async_session_maker() as db:
        store = AnalysisStore(db)
        await store.save(DEMO_USER_ID, SAMPLE_ANALYSIS, resume_file_path="uploads/demo_resume.pdf")
        print(f"✅ Sample analysis stored for {DEMO_USER_ID}")


if __name__ == "__main__":
    asyncio.run(seed_sample_analysis())
