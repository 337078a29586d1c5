from models.employee import Employee
from utils.db import employees_col, offices_col, serialize_doc


class DirectoryService:
    """Read-only lookups for seeded employees and offices."""

    def __init__(self, db):
        self.db = db

    def list_employees(self):
        return list(employees_col(self.db).find({}, {"_id": 0, "name": 1}))

    def list_offices(self):
        return [serialize_doc(o) for o in offices_col(self.db).find({})]

    def add_employees(self, names):
        docs = [Employee(name).to_dict() for name in names]
        if not docs:
            return 0
        return len(employees_col(self.db).insert_many(docs).inserted_ids)

    def add_offices(self, offices):
        docs = [office.to_dict() for office in offices]
        if not docs:
            return 0
        return len(offices_col(self.db).insert_many(docs).inserted_ids)
