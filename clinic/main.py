"""
Application startup.
Configures logging, creates the schema and optionally loads sample data.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

import logging
from sqlalchemy.exc import SQLAlchemyError

from .config import settings
from .database import SessionLocal, init_db
from .exceptions import ClinicException
from .seed import seed_sample_data

logger = logging.getLogger(__name__)

def configure_logging(level: str = None) -> None:
    """
    Configure root logging.

    Args:
        level: Log level name (defaults to settings.log_level)
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def init_app(bind=None, session_factory=SessionLocal, seed: bool = None) -> bool:
    """
    Prepare the clinic database.

    Args:
        bind: Engine to create tables on (defaults to the configured engine)
        session_factory: Session factory used for seeding
        seed: Load sample data (defaults to settings.seed_sample_data)

    Returns:
        bool: True if sample data was loaded
    """
    configure_logging()
    logger.info("Starting clinic records...")

    # Create database tables if they don't exist
    init_db(bind)

    if seed is None:
        seed = settings.seed_sample_data
    if not seed:
        return False

    db = session_factory()
    try:
        return seed_sample_data(db)
    except (ClinicException, SQLAlchemyError) as e:
        logger.error(f"Sample data load failed: {str(e)}")
        return False
    finally:
        db.close()
