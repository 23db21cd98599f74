# registrar/crud/department.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.models.department import Department
from registrar.schemas.department import DepartmentCreate

class CRUDDepartment(CRUDBase[Department, DepartmentCreate, DepartmentCreate]):
    def list(self, db: Session) -> List[Department]:
        return list(db.scalars(select(Department).order_by(Department.code)).all())

department_crud = CRUDDepartment(Department)
