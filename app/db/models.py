"""
SQLAlchemy ORM models for database tables.

YAGNI: one table, mirroring the Employee aggregate field set.
"""
from sqlalchemy import Column, String, DateTime, Index, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class EmployeeModel(Base):
    """
    Employees table - persisted state of the Employee aggregate.

    The unique constraint on employee_registration is the final authority
    for registration uniqueness: the check-then-create in the application
    layer is not atomic, so a concurrent duplicate insert must fail here.
    """
    __tablename__ = "employees"

    id = Column(String(32), primary_key=True)  # uuid4 hex, assigned by the repository
    name = Column(String(100), nullable=False)
    job_role = Column(String(50), nullable=False)
    salary = Column(Numeric(12, 2, asdecimal=True), nullable=False)  # up to 9,999,999,999.99
    employee_registration = Column(Integer, nullable=False)  # 6 digits
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    __table_args__ = (
        UniqueConstraint('employee_registration', name='uq_employees_employee_registration'),
        Index('idx_employees_created_at', 'created_at'),
    )
