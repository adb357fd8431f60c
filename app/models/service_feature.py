from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base
from app.models.vehicle_type import vehicle_type_service_feature

class ServiceFeature(Base):
    __tablename__ = "service_features"

    id: Mapped[int] = mapped_column(primary_key=True)
    name_en: Mapped[str] = mapped_column(String(255))
    name_es: Mapped[str] = mapped_column(String(255))
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_es: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    vehicle_types = relationship("VehicleType", secondary=vehicle_type_service_feature, back_populates="service_features")

    def get_name(self, locale: str = "en") -> str:
        return self.name_es if locale == "es" else self.name_en

    def get_description(self, locale: str = "en") -> str | None:
        return self.description_es if locale == "es" else self.description_en
