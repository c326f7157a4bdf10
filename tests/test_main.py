# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the command-line entry point.
"""

import pytest

from html_error_middleware import main as main_module
from html_error_middleware.config import Config


class TestMain:
    """Tests for main()."""

    def test_exits_on_invalid_config(self, mocker, capsys):
        """Should print configuration errors and exit with status 1."""
        mocker.patch.object(main_module, "load_dotenv")
        mocker.patch.object(Config, "from_cli_args")

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        assert "SECRET_KEY" in capsys.readouterr().out

    def test_runs_app_with_configured_host(self, mocker):
        """Should run the app on the configured host and port."""
        mocker.patch.object(main_module, "load_dotenv")
        mocker.patch.object(Config, "from_cli_args")
        create_app = mocker.patch("html_error_middleware.factory.create_app")
        Config.FLASK_ENV = "development"
        Config.PORT = 8123

        main_module.main()

        create_app.return_value.run.assert_called_once_with(
            host="127.0.0.1", port=8123, debug=False
        )
