# registrar/schemas/stats.py
from typing import Dict
from registrar.schemas.base import APIModel

class AdminStats(APIModel):
    users_by_role: Dict[str, int]
    courses: int
    departments: int
    enrollments_by_status: Dict[str, int]
    seats_offered: int
    seats_taken: int
