import os
import unittest
from unittest import mock

from pydantic import ValidationError

from page_analyzer import main as main_module
from page_analyzer.config import Settings, get_database_url, is_postgresql


class SettingsTest(unittest.TestCase):

    def test_database_url_is_required(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings()

    def test_reads_environment(self):
        env = {
            "DATABASE_URL": "postgresql://user:pass@db:5432/analyzer",
            "CHECK_TIMEOUT": "5",
            "RECORD_FAILED_CHECKS": "true",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()
        self.assertEqual(settings.database_url, env["DATABASE_URL"])
        self.assertEqual(settings.check_timeout, 5.0)
        self.assertTrue(settings.record_failed_checks)

    def test_defaults(self):
        with mock.patch.dict(os.environ, {"DATABASE_URL": "sqlite+aiosqlite:///x.db"}, clear=True):
            settings = Settings()
        self.assertEqual(settings.check_timeout, 10.0)
        self.assertFalse(settings.record_failed_checks)
        self.assertEqual(settings.web_port, 8000)


class DatabaseUrlTest(unittest.TestCase):

    def test_heroku_style_url_uses_asyncpg(self):
        settings = Settings(database_url="postgres://u:p@host:5432/db")
        self.assertEqual(get_database_url(settings), "postgresql+asyncpg://u:p@host:5432/db")

    def test_plain_postgresql_url_uses_asyncpg(self):
        settings = Settings(database_url="postgresql://u:p@host/db")
        self.assertEqual(get_database_url(settings), "postgresql+asyncpg://u:p@host/db")

    def test_asyncpg_url_unchanged(self):
        settings = Settings(database_url="postgresql+asyncpg://u:p@host/db")
        self.assertEqual(get_database_url(settings), "postgresql+asyncpg://u:p@host/db")
        self.assertTrue(is_postgresql(get_database_url(settings)))

    def test_sqlite_url_unchanged(self):
        settings = Settings(database_url="sqlite+aiosqlite:///./page_analyzer.db")
        self.assertEqual(get_database_url(settings), "sqlite+aiosqlite:///./page_analyzer.db")
        self.assertFalse(is_postgresql(get_database_url(settings)))


class MainTest(unittest.TestCase):

    def test_refuses_to_start_without_database_url(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with mock.patch("uvicorn.run") as run:
                with self.assertRaises(SystemExit) as ctx:
                    main_module.main()
        self.assertEqual(ctx.exception.code, 1)
        run.assert_not_called()
