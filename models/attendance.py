import math
import re

_LEADING_FLOAT = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value):
    """
    Coerce a form value to float using its longest numeric prefix.
    "12.5", " 12.5abc" -> 12.5 ; "abc", "", None -> nan. Never raises.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if value is None:
        return math.nan
    match = _LEADING_FLOAT.match(str(value).strip())
    if not match:
        return math.nan
    return float(match.group(0))


def as_text(value):
    """String fields stay strings even when a JSON client sends numbers or booleans."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Attendance:
    def __init__(self, employee=None, type=None, date=None, time=None, latitude=None, longitude=None,
                 location=None, selfie_url=None, office=None):
        self.employee = as_text(employee)
        self.type = as_text(type)  # "check-in" | "check-out" | any tag the client sends
        self.date = as_text(date)
        self.time = as_text(time)
        self.latitude = parse_float(latitude)
        self.longitude = parse_float(longitude)
        self.location = as_text(location)
        self.selfie_url = as_text(selfie_url)
        self.office = as_text(office)

    @classmethod
    def from_form(cls, form, selfie_url=""):
        return cls(
            employee=form.get("employee"),
            type=form.get("type"),
            date=form.get("date"),
            time=form.get("time"),
            latitude=form.get("latitude"),
            longitude=form.get("longitude"),
            location=form.get("location"),
            selfie_url=selfie_url,
            office=form.get("office"),
        )

    def to_dict(self):
        doc = {
            "employee": self.employee,
            "type": self.type,
            "date": self.date,
            "time": self.time,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "location": self.location,
            "selfieUrl": self.selfie_url,
            "office": self.office,
        }
        # Fields the client did not send are left out of the document
        return {key: value for key, value in doc.items() if value is not None}

    # Field order is what the mobile dashboard expects
    @staticmethod
    def to_response(doc):
        return {
            "employee": doc.get("employee"),
            "type": doc.get("type"),
            "date": doc.get("date"),
            "time": doc.get("time"),
            "location": doc.get("location"),
            "office": doc.get("office") or "",
            "selfie": doc.get("selfieUrl") or "",
        }
