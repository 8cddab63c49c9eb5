"""
Tests for configuration, logging setup and the exception hierarchy.
"""

import logging
from pathlib import Path

from logging_config import get_logger, setup_logging
from wrapscan.config import get_build_dir, get_project_root
from wrapscan.exceptions import (
    ArtifactLookupError,
    ArtifactNotFoundError,
    ExtractionError,
    MissingCapabilityError,
    SourceError,
    SourceSyntaxError,
    WrapscanError,
)


class TestConfig:
    """Environment-driven defaults."""

    def test_project_root_from_env(self, monkeypatch):
        monkeypatch.setenv("WRAPSCAN_PROJECT_ROOT", "/srv/project")
        assert get_project_root() == Path("/srv/project")

    def test_project_root_defaults_to_cwd(self, monkeypatch):
        monkeypatch.delenv("WRAPSCAN_PROJECT_ROOT", raising=False)
        assert get_project_root() == Path.cwd()

    def test_build_dir_under_project_root(self, monkeypatch):
        monkeypatch.delenv("WRAPSCAN_BUILD_DIR", raising=False)
        monkeypatch.setenv("WRAPSCAN_PROJECT_ROOT", "/srv/project")
        assert get_build_dir() == Path("/srv/project/build")

    def test_build_dir_from_env(self, monkeypatch):
        monkeypatch.setenv("WRAPSCAN_BUILD_DIR", "/srv/artifacts")
        assert get_build_dir() == Path("/srv/artifacts")


class TestLogging:
    """Logger setup."""

    def test_component_logger_name(self):
        assert get_logger("ast.parser").name == "wrapscan.ast.parser"

    def test_debug_from_env(self, monkeypatch):
        monkeypatch.setenv("WRAPSCAN_DEBUG", "true")
        monkeypatch.delenv("WRAPSCAN_LOG_FILE", raising=False)
        logger = setup_logging()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        logger.handlers.clear()

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "wrapscan.log"
        logger = setup_logging(debug=False, log_file=str(log_file))

        assert logger.level == logging.INFO
        assert log_file.exists()
        stderr_handler, file_handler = logger.handlers
        assert stderr_handler.level == logging.WARNING
        assert isinstance(file_handler, logging.FileHandler)

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


class TestExceptions:
    """Exception hierarchy and details."""

    def test_hierarchy(self):
        assert issubclass(SourceSyntaxError, SourceError)
        assert issubclass(SourceError, WrapscanError)
        assert issubclass(MissingCapabilityError, ExtractionError)
        assert issubclass(ArtifactNotFoundError, ArtifactLookupError)
        assert issubclass(ArtifactLookupError, WrapscanError)

    def test_missing_capability_details(self):
        error = MissingCapabilityError("Foo", "createFromAddress")
        assert error.class_name == "Foo"
        assert error.details == {"class_name": "Foo", "capability": "createFromAddress"}
        assert str(error).startswith("Wrapper Foo cannot be created from address")

    def test_syntax_error_keeps_all_diagnostics(self):
        diagnostics = [{"line": i, "column": 0, "message": "Missing ;"} for i in range(1, 8)]
        error = SourceSyntaxError("Missing ; (1:0)", diagnostics)
        assert len(error.diagnostics) == 7
        assert len(error.details["diagnostics"]) == 5

    def test_str_without_details(self):
        assert str(WrapscanError("plain")) == "plain"
