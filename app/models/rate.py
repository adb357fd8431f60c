from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Integer, Boolean, Date, DateTime, Text, Numeric, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base

class Rate(Base):
    """Price of one vehicle type between two zones, optionally pinned to two locations.

    Zone ids are always set. When both location ids are set the rate is a
    location-specific override and wins over the plain zone rate.
    """

    __tablename__ = "rates"
    __table_args__ = (
        Index("ix_rates_service_zones", "service_type_id", "from_zone_id", "to_zone_id"),
        Index("ix_rates_service_locations", "service_type_id", "from_location_id", "to_location_id"),
        Index("ix_rates_validity", "available", "valid_from", "valid_to"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    service_type_id: Mapped[int] = mapped_column(ForeignKey("service_types.id", ondelete="CASCADE"))
    vehicle_type_id: Mapped[int] = mapped_column(ForeignKey("vehicle_types.id", ondelete="CASCADE"))

    from_zone_id: Mapped[int] = mapped_column(ForeignKey("zones.id", ondelete="CASCADE"))
    to_zone_id: Mapped[int] = mapped_column(ForeignKey("zones.id", ondelete="CASCADE"))
    from_location_id: Mapped[int | None] = mapped_column(ForeignKey("locations.id", ondelete="CASCADE"), nullable=True)
    to_location_id: Mapped[int | None] = mapped_column(ForeignKey("locations.id", ondelete="CASCADE"), nullable=True)

    # all amounts are USD
    cost_vehicle_one_way: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    total_one_way: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    cost_vehicle_round_trip: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    total_round_trip: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    num_vehicles: Mapped[int] = mapped_column(Integer, default=1)

    available: Mapped[bool] = mapped_column(Boolean, default=True)
    highlighted: Mapped[bool] = mapped_column(Boolean, default=False)
    highlight_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    highlight_badge: Mapped[str | None] = mapped_column(String(255), nullable=True)

    valid_from: Mapped[date | None] = mapped_column(Date, nullable=True)
    valid_to: Mapped[date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    service_type = relationship("ServiceType")
    vehicle_type = relationship("VehicleType", back_populates="rates")
    from_zone = relationship("Zone", foreign_keys=[from_zone_id])
    to_zone = relationship("Zone", foreign_keys=[to_zone_id])
    from_location = relationship("Location", foreign_keys=[from_location_id])
    to_location = relationship("Location", foreign_keys=[to_location_id])
