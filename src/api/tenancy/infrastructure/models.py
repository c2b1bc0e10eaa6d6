"""SQLAlchemy ORM models for the tenants and memberships tables.

The schema is owned by the store's management service; these mappings
cover the columns the tenancy gate reads.
"""

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class TenantModel(Base, TimestampMixin):
    """ORM model for the tenants table.

    Note: slugs are unique across the whole system and stored lower-cased.
    """

    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    slug: Mapped[str] = mapped_column(String(63), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=true()
    )
    plan: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<TenantModel(id={self.id}, slug={self.slug}, "
            f"is_active={self.is_active}, plan={self.plan})>"
        )


class MembershipModel(Base, TimestampMixin):
    """ORM model for the memberships table.

    A caller has at most one membership (and therefore one role) per tenant.
    """

    __tablename__ = "memberships"
    __table_args__ = (UniqueConstraint("tenant_id", "user_id"),)

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<MembershipModel(tenant_id={self.tenant_id}, "
            f"user_id={self.user_id}, role={self.role})>"
        )
