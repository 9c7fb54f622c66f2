"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from flatwiki.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("data")
            assert s.template_dir is None
            assert s.page_suffix == ".txt"
            assert s.front_page == "FrontPage"
            assert s.host == "0.0.0.0"
            assert s.port == 9090
            assert s.debug is False
            assert s.app_title == "FlatWiki"

    def test_from_env(self):
        env = {
            "FLATWIKI_DATA_DIR": "/tmp/wiki",
            "FLATWIKI_TEMPLATE_DIR": "/tmp/tmpl",
            "FLATWIKI_PORT": "8080",
            "FLATWIKI_DEBUG": "true",
            "FLATWIKI_FRONT_PAGE": "Home",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("/tmp/wiki")
            assert s.template_dir == Path("/tmp/tmpl")
            assert s.port == 8080
            assert s.debug is True
            assert s.front_page == "Home"

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FLATWIKI_APP_TITLE=MyWiki\n")
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=env_file)
            assert s.app_title == "MyWiki"

    def test_invalid_log_level_rejected(self):
        with patch.dict("os.environ", {"FLATWIKI_LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_log_level_from_env(self):
        with patch.dict("os.environ", {"FLATWIKI_LOG_LEVEL": "debug"}, clear=True):
            assert Settings(_env_file=None).log_level == "debug"

    def test_settings_are_immutable(self):
        s = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            s.port = 1
