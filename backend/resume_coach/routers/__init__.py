from .uploads import router as uploads_router
from .resume import router as resume_router
from .chat import router as chat_router

__all__ = [
    "uploads_router", "resume_router", "chat_router"
]
