"""
utils/uploads.py
-----------------
Local disk storage for attendance selfies.

Every upload gets a fresh "<epoch-millis>-<random>.jpg" name; the client's
filename and content type are ignored.
"""

import logging
import os
import random
import time

logger = logging.getLogger(__name__)

SELFIE_FIELD = "selfie"
SELFIE_EXTENSION = ".jpg"


def generate_selfie_filename():
    return f"{int(time.time() * 1000)}-{round(random.random() * 1e9)}{SELFIE_EXTENSION}"


class SelfieStore:

    def __init__(self, folder):
        self.folder = os.path.abspath(folder)

    def ensure_folder(self):
        os.makedirs(self.folder, exist_ok=True)

    def save(self, file_storage):
        """Write an uploaded werkzeug FileStorage to disk and return the stored filename."""
        self.ensure_folder()
        filename = generate_selfie_filename()
        file_storage.save(os.path.join(self.folder, filename))
        logger.debug("Stored selfie %s", filename)
        return filename

    def save_from_request(self, files):
        """Return the stored filename for the request's selfie, or None when no file was sent."""
        file_storage = files.get(SELFIE_FIELD)
        if file_storage is None or not file_storage.filename:
            return None
        return self.save(file_storage)

    def prune(self, max_age_days, now=None):
        """Delete stored selfies older than max_age_days. Returns the removed filenames."""
        if max_age_days <= 0 or not os.path.isdir(self.folder):
            return []

        cutoff = (now or time.time()) - max_age_days * 86400
        removed = []
        for entry in os.scandir(self.folder):
            if not entry.is_file() or not entry.name.endswith(SELFIE_EXTENSION):
                continue
            if entry.stat().st_mtime < cutoff:
                os.remove(entry.path)
                removed.append(entry.name)

        logger.info("Pruned %d selfie(s) older than %d day(s) from %s", len(removed), max_age_days, self.folder)
        return sorted(removed)
