"""Tests for the test_db_connection adapter."""

from src.adapters import test_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_logs_successful_check(monkeypatch):
    """The CLI should log the platform URL and execute SELECT 1."""
    platform_engine = _DummyEngine("postgresql://platform")

    class _Adapter:
        def get_platform_engine(self):
            return platform_engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        test_db_connection,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        test_db_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    test_db_connection.main()

    assert "postgresql://platform" in log_messages[0]
    assert log_messages[1] == "The platform connection is working."
    assert platform_engine.connection.executed == ["SELECT 1"]
