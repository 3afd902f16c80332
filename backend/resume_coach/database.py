from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from .config import get_settings

settings = get_settings()


def create_engine_for(database_url: str, echo: bool = False):
    """Build an async engine with pool settings suited to the backend."""
    # Supabase/PostgreSQL with PgBouncer needs statement_cache_size=0
    # SQLite doesn't support these parameters
    connect_args = {}
    engine_kwargs = {}
    if "postgresql" in database_url:
        connect_args = {
            "statement_cache_size": 0,
            "prepared_statement_cache_size": 0,
        }
        engine_kwargs = {
            "pool_pre_ping": True,  # Verify connections before use
            "pool_recycle": 300,    # Recycle connections every 5 minutes
            "pool_size": 20,
            "max_overflow": 30,
        }

    return create_async_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        **engine_kwargs,
    )


engine = create_engine_for(settings.database_url, echo=settings.debug)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(bind=None):
    # Register models on Base.metadata before creating tables
    from . import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
