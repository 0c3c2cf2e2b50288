"""Resource and document access for command-line programs."""

from __future__ import annotations

import os
import subprocess
from functools import lru_cache

_URL_TEMP = "_utils_load_url.temp~"


class Utils:
    """File helpers; documents live relative to the working directory."""

    def get_app_id(self):
        return ""

    def get_device_id(self):
        return ""

    def get_system_language(self):
        return ""

    def get_document_path(self, path):
        """Absolute paths are kept; others are placed under ``./``."""
        if path.startswith("/"):
            return path
        return "./" + path

    def is_resource_exist(self, path):
        return os.access(path, os.F_OK)

    def is_document_exist(self, path):
        return os.access(self.get_document_path(path), os.F_OK)

    def load_resource(self, path):
        """Return the file's bytes, or empty bytes if it cannot be read."""
        try:
            with open(path, "rb") as file:
                return file.read()
        except OSError:
            return b""

    def load_document(self, path):
        """Return a document's bytes, or empty bytes if it cannot be read."""
        return self.load_resource(self.get_document_path(path))

    def save_document(self, path, data):
        """Write ``data`` to a document; return whether it succeeded."""
        try:
            with open(self.get_document_path(path), "wb") as file:
                file.write(bytes(data))
        except OSError:
            return False
        return True

    def load_url(self, url):
        """Fetch ``url`` with curl into a temporary document and return its bytes."""
        path = self.get_document_path(_URL_TEMP)
        try:
            subprocess.run(
                ["curl", url, "-o", path],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            return b""
        return self.load_resource(path)


@lru_cache(maxsize=None)
def get_utils():
    """Return the shared :class:`Utils` instance."""
    return Utils()