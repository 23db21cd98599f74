# registrar/schemas/department.py
from pydantic import Field
from registrar.schemas.base import APIModel

class DepartmentCreate(APIModel):
    code: str = Field(min_length=1, max_length=16)
    name: str = Field(min_length=1, max_length=160)

class Department(DepartmentCreate):
    id: int
