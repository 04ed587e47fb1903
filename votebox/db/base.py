"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here so their tables are registered on Base.metadata
from votebox.db.models.poll import Poll  # noqa: F401, E402
from votebox.db.models.poll_option import PollOption  # noqa: F401, E402
