# pos_app/models/app_settings.py

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from pos_app.database import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
