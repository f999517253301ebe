# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""PortfolioSettings ORM model – single-row theme and site configuration."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from database import Base


class PortfolioSettings(Base):
    __tablename__ = "portfolio_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    primary = Column(String(50), nullable=False, default="#3b82f6")
    variant = Column(String(50), nullable=False, default="professional")
    appearance = Column(String(20), nullable=False, default="system")
    radius = Column(Integer, nullable=False, default=8)
    site_title = Column(String(100), nullable=False)
    logo = Column(String(255), nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
