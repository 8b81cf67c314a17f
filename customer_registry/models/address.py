from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from customer_registry.models.base import Base


class Address(Base):
    """Address owned by exactly one customer"""
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)

    customer = relationship("Customer", back_populates="addresses")

    __table_args__ = (
        Index("idx_addresses_customer", "customer_id"),
        {"sqlite_autoincrement": True},
    )
