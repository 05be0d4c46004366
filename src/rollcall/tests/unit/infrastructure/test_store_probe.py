"""Unit tests for the key-value store domain probe."""

from unittest.mock import Mock

from infrastructure.observability import DefaultKeyValueStoreProbe, ObservationContext


class TestDefaultKeyValueStoreProbe:
    """Tests for DefaultKeyValueStoreProbe."""

    def test_accepts_custom_logger(self):
        custom_logger = Mock()
        probe = DefaultKeyValueStoreProbe(logger=custom_logger)
        assert probe._logger is custom_logger

    def test_entry_written_includes_backend(self):
        mock_logger = Mock()
        probe = DefaultKeyValueStoreProbe(logger=mock_logger, backend="sqlite")

        probe.entry_written("k", size=12)

        call_args = mock_logger.debug.call_args
        assert call_args[0][0] == "entry_written"
        assert call_args[1]["key"] == "k"
        assert call_args[1]["size"] == 12
        assert call_args[1]["backend"] == "sqlite"

    def test_storage_operation_failed_logs_error_type(self):
        mock_logger = Mock()
        probe = DefaultKeyValueStoreProbe(logger=mock_logger)

        probe.storage_operation_failed("set", "k", OSError("disk full"))

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert call_args[0][0] == "storage_operation_failed"
        assert call_args[1]["operation"] == "set"
        assert call_args[1]["error"] == "disk full"
        assert call_args[1]["error_type"] == "OSError"

    def test_with_context_keeps_backend(self):
        mock_logger = Mock()
        probe = DefaultKeyValueStoreProbe(logger=mock_logger, backend="memory")

        bound = probe.with_context(ObservationContext(operation_id="op-7"))
        bound.entry_removed("k")

        call_args = mock_logger.debug.call_args
        assert call_args[1]["backend"] == "memory"
        assert call_args[1]["operation_id"] == "op-7"
