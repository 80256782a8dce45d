import logging

from blog_api.core.config import DEFAULT_SECRET_KEY, Settings
from blog_api.main import warn_if_default_secret


def test_default_secret_key_is_reported(caplog):
    config = Settings(_env_file=None, SECRET_KEY=DEFAULT_SECRET_KEY)

    with caplog.at_level(logging.WARNING, logger="blog_api.main"):
        assert warn_if_default_secret(config) is True
    assert "SECRET_KEY is the built-in default" in caplog.text


def test_custom_secret_key_is_silent(caplog, test_settings):
    with caplog.at_level(logging.WARNING, logger="blog_api.main"):
        assert warn_if_default_secret(test_settings) is False
    assert caplog.text == ""
