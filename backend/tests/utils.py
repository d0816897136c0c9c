"""Helpers shared by the test modules."""
import os
import sqlite3
import tempfile

from page_analyzer.services.checker import ProbeResult


def temp_database():
    """Create an empty SQLite file; returns (async url, path)."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    return f"sqlite+aiosqlite:///{path}", path


def remove_database(path):
    for suffix in ("", "-wal", "-shm"):
        if os.path.exists(path + suffix):
            os.remove(path + suffix)


def query(path, sql, params=()):
    """Read rows straight from the SQLite file."""
    conn = sqlite3.connect(path)
    try:
        return conn.execute(sql, params).fetchall()
    finally:
        conn.close()


class StubChecker:
    """Stands in for LivenessChecker; hands out canned results in order."""

    def __init__(self, *results):
        self.results = list(results) or [ProbeResult(status_code=200)]
        self.calls = []

    async def check(self, url):
        self.calls.append(url)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]
