"""initial transport catalog

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("state", sa.String(length=255), nullable=True),
        sa.Column("country", sa.String(length=255), nullable=True),
        sa.Column("slug", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("external_id", sa.String(length=64), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_cities_name", "cities", ["name"], unique=True)
    op.create_index("ix_cities_external_id", "cities", ["external_id"], unique=False)

    op.create_table(
        "zones",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("external_id", sa.String(length=64), nullable=True, unique=True),
        *_timestamps(),
    )
    op.create_index("ix_zones_name", "zones", ["name"], unique=False)
    op.create_index("ix_zones_city_id", "zones", ["city_id"], unique=False)

    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=10), nullable=False, server_default="P"),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("zone_id", sa.Integer(), sa.ForeignKey("zones.id", ondelete="SET NULL"), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("external_id", sa.String(length=64), nullable=True, unique=True),
        *_timestamps(),
    )
    op.create_index("ix_locations_name", "locations", ["name"], unique=False)
    op.create_index("ix_locations_type", "locations", ["type"], unique=False)
    op.create_index("ix_locations_city_id", "locations", ["city_id"], unique=False)
    op.create_index("ix_locations_zone_id", "locations", ["zone_id"], unique=False)

    op.create_table(
        "service_types",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("tpv_type", sa.String(length=40), nullable=False, server_default="service_airport"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_service_types_code", "service_types", ["code"], unique=True)

    op.create_table(
        "vehicle_types",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("image", sa.String(length=255), nullable=True),
        sa.Column("max_units", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("max_pax", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("travel_time", sa.String(length=255), nullable=True),
        sa.Column("video_url", sa.String(length=500), nullable=True),
        sa.Column("frame", sa.String(length=255), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "service_features",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name_en", sa.String(length=255), nullable=False),
        sa.Column("name_es", sa.String(length=255), nullable=False),
        sa.Column("description_en", sa.Text(), nullable=True),
        sa.Column("description_es", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=255), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )

    op.create_table(
        "vehicle_type_service_feature",
        sa.Column("vehicle_type_id", sa.Integer(), sa.ForeignKey("vehicle_types.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("service_feature_id", sa.Integer(), sa.ForeignKey("service_features.id", ondelete="CASCADE"), primary_key=True),
        sa.UniqueConstraint("vehicle_type_id", "service_feature_id", name="vehicle_feature_unique"),
    )

    op.create_table(
        "rates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("service_type_id", sa.Integer(), sa.ForeignKey("service_types.id", ondelete="CASCADE"), nullable=False),
        sa.Column("vehicle_type_id", sa.Integer(), sa.ForeignKey("vehicle_types.id", ondelete="CASCADE"), nullable=False),
        sa.Column("from_zone_id", sa.Integer(), sa.ForeignKey("zones.id", ondelete="CASCADE"), nullable=False),
        sa.Column("to_zone_id", sa.Integer(), sa.ForeignKey("zones.id", ondelete="CASCADE"), nullable=False),
        sa.Column("from_location_id", sa.Integer(), sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=True),
        sa.Column("to_location_id", sa.Integer(), sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=True),
        sa.Column("cost_vehicle_one_way", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_one_way", sa.Numeric(10, 2), nullable=False),
        sa.Column("cost_vehicle_round_trip", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_round_trip", sa.Numeric(10, 2), nullable=False),
        sa.Column("num_vehicles", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("highlighted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("highlight_description", sa.Text(), nullable=True),
        sa.Column("highlight_badge", sa.String(length=255), nullable=True),
        sa.Column("valid_from", sa.Date(), nullable=True),
        sa.Column("valid_to", sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_rates_service_zones", "rates", ["service_type_id", "from_zone_id", "to_zone_id"], unique=False)
    op.create_index("ix_rates_service_locations", "rates", ["service_type_id", "from_location_id", "to_location_id"], unique=False)
    op.create_index("ix_rates_validity", "rates", ["available", "valid_from", "valid_to"], unique=False)

    op.create_table(
        "currency_exchanges",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("from_currency", sa.String(length=3), nullable=False),
        sa.Column("to_currency", sa.String(length=3), nullable=False),
        sa.Column("exchange_rate", sa.Numeric(10, 6), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("from_currency", "to_currency", name="uq_currency_pair"),
    )


def downgrade() -> None:
    op.drop_table("currency_exchanges")
    op.drop_table("rates")
    op.drop_table("vehicle_type_service_feature")
    op.drop_table("service_features")
    op.drop_table("vehicle_types")
    op.drop_table("service_types")
    op.drop_table("locations")
    op.drop_table("zones")
    op.drop_table("cities")
