import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Index, String, Text, TypeDecorator, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from site_service.models.enums import Currency, Language, SiteStatus


class Base(DeclarativeBase):
    pass


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime; backends without tz support (SQLite) come back as UTC"""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Site(Base):
    __tablename__ = "sites"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    currency: Mapped[Currency] = mapped_column(
        Enum(Currency, native_enum=False, length=10), nullable=False
    )
    language: Mapped[Language] = mapped_column(
        Enum(Language, native_enum=False, length=10), nullable=False
    )
    status: Mapped[SiteStatus] = mapped_column(
        Enum(SiteStatus, native_enum=False, length=20), nullable=False, default=SiteStatus.DRAFT
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    config: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    __table_args__ = (
        Index("idx_sites_owner", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Site id={self.id} slug={self.slug!r} status={self.status}>"
