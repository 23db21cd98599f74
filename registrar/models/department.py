# registrar/models/department.py
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String
from registrar.db.base_class import Base

class Department(Base):
    __tablename__ = "departments"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(16), unique=True)
    name: Mapped[str] = mapped_column(String(160))

    courses = relationship("Course", back_populates="department")
