from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime, Column, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base

vehicle_type_service_feature = Table(
    "vehicle_type_service_feature",
    Base.metadata,
    Column("vehicle_type_id", ForeignKey("vehicle_types.id", ondelete="CASCADE"), primary_key=True),
    Column("service_feature_id", ForeignKey("service_features.id", ondelete="CASCADE"), primary_key=True),
    UniqueConstraint("vehicle_type_id", "service_feature_id", name="vehicle_feature_unique"),
)

class VehicleType(Base):
    __tablename__ = "vehicle_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))  # standard private, vip private, limousine
    code: Mapped[str] = mapped_column(String(10))    # ES, VP, LS
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    max_units: Mapped[int] = mapped_column(Integer, default=1)
    max_pax: Mapped[int] = mapped_column(Integer, default=1)
    travel_time: Mapped[str | None] = mapped_column(String(255), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    frame: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    service_features = relationship(
        "ServiceFeature",
        secondary=vehicle_type_service_feature,
        back_populates="vehicle_types",
        order_by="ServiceFeature.sort_order",
    )
    rates = relationship("Rate", back_populates="vehicle_type", passive_deletes=True)
