import logging

from models.attendance import Attendance
from utils.db import attendance_col

logger = logging.getLogger(__name__)


class AttendanceService:
    """Write path and dashboard query for attendance records. Holds no per-request state."""

    def __init__(self, db):
        self.db = db

    def record(self, form, selfie_url=""):
        """
        Persist one attendance record from submitted form fields.

        Nothing is required and latitude/longitude fall back to NaN when they
        do not parse. Resubmitting the same fields stores another record.
        Storage errors propagate to the caller.
        """
        attendance = Attendance.from_form(form, selfie_url=selfie_url)
        result = attendance_col(self.db).insert_one(attendance.to_dict())
        logger.info(
            "Recorded attendance %s for employee=%r type=%r date=%r",
            result.inserted_id, attendance.employee, attendance.type, attendance.date,
        )
        return {"success": True, "message": "Attendance recorded successfully."}

    def list_attendance(self, employee=None, date=None):
        query = {}
        if employee:
            query["employee"] = employee
        if date:
            query["date"] = date

        records = attendance_col(self.db).find(query)
        return [Attendance.to_response(r) for r in records]
