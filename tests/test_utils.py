import importlib
from pathlib import Path
from unittest.mock import patch

import coreason_aem_client.utils.logger as logger_module
from coreason_aem_client.utils.logger import _ensure_log_directory, configure_logger, logger


def test_logger_exports() -> None:
    """Test that logger is exported."""
    assert logger is not None


def test_ensure_log_directory() -> None:
    """Test _ensure_log_directory logic explicitly."""
    with patch("pathlib.Path.exists", return_value=False):
        with patch("pathlib.Path.mkdir") as mock_mkdir:
            log_dir = _ensure_log_directory("logs/aem.log")
            mock_mkdir.assert_called_with(parents=True, exist_ok=True)
    assert log_dir == Path("logs")


def test_configure_logger_file_sink(tmp_path: Path) -> None:
    """Test that a file sink is written to a created directory."""
    log_file = tmp_path / "nested" / "aem.log"

    configure_logger(level="INFO", log_file=str(log_file))
    logger.info("file sink check")
    logger.complete()

    assert log_file.parent.is_dir()
    configure_logger(level="INFO", log_file=None)


def test_import_keeps_existing_sinks() -> None:
    """Test that importing the logger module does not replace the host's sinks."""
    with patch.object(logger, "remove") as mock_remove, patch.object(logger, "add") as mock_add:
        importlib.reload(logger_module)

    mock_remove.assert_not_called()
    mock_add.assert_not_called()


def test_configure_logger_replaces_sinks() -> None:
    """Test that an explicit configure call installs the client's sinks."""
    with patch.object(logger, "remove") as mock_remove, patch.object(logger, "add") as mock_add:
        configure_logger(level="DEBUG")

    mock_remove.assert_called_once_with()
    mock_add.assert_called_once()
    assert mock_add.call_args.kwargs["level"] == "DEBUG"
