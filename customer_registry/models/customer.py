from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from customer_registry.models.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    cpf = Column(String(11), nullable=False)

    addresses = relationship(
        "Address",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="Address.id",
    )

    # cpf doubles as an alternate lookup key
    __table_args__ = (
        UniqueConstraint("cpf", name="uq_customers_cpf"),
        {"sqlite_autoincrement": True},
    )
