# models/__init__.py

from .attendance import Attendance
from .employee import Employee
from .office import Office
from .users import User

__all__ = [
    "Attendance",
    "Employee",
    "Office",
    "User"
]
