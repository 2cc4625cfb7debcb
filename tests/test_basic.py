"""Basic tests for the travel log engine and configuration."""

import pytest
from pathlib import Path

from travel_log.application.config import Config
from travel_log.application.engine import TravelLogEngine
from travel_log.domain.models import ResultType
from travel_log.session import SessionStatus


@pytest.fixture
def engine(config):
    engine = TravelLogEngine(config)
    engine.initialize()
    return engine


def test_config_creation(tmp_path):
    """Test configuration defaults."""
    config = Config(storage_path=tmp_path / "storage")

    assert config.search.results_limit == 10
    assert config.search.debounce_delay == 0.2
    assert config.search.history_limit == 5
    assert config.search.details_preview_length == 50
    assert config.storage.data_file == tmp_path / "storage" / "travel_log.json"
    assert config.storage.history_file.parent == tmp_path / "storage"


def test_config_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("TRAVEL_LOG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TRAVEL_LOG_SEARCH__RESULTS_LIMIT", "3")
    config = Config(storage_path=tmp_path)

    assert config.log_level == "DEBUG"
    assert config.search.results_limit == 3


def test_config_file_round_trip(tmp_path):
    config = Config(storage_path=tmp_path / "storage")
    config.search.results_limit = 7

    for name in ("config.yaml", "config.json"):
        path = tmp_path / name
        config.save_to_file(path)
        loaded = Config.load_from_file(path)
        assert loaded.search.results_limit == 7
        assert loaded.storage_path == tmp_path / "storage"


def test_config_unsupported_format(tmp_path):
    with pytest.raises(ValueError):
        Config.load_from_file(tmp_path / "config.toml")


def test_engine_initialization(engine):
    """Test engine initialization on an empty storage directory."""
    assert engine._initialized is True
    assert engine.store is not None
    assert engine.history is not None
    assert engine.search("paris") == []


def test_entries_persist(config):
    engine = TravelLogEngine(config)
    engine.add_entry(2023, 5, "Paris", "Amazing summer trip to Paris")

    reloaded = TravelLogEngine(config)
    results = reloaded.search("paris")
    assert len(results) == 1
    assert results[0].entry.location == "Paris"


def test_update_and_remove(engine):
    entry = engine.add_entry(2023, 5, "Paris")
    engine.update_entry(2023, 5, entry.id, "Lyon")
    assert engine.search("lyon")[0].entry.id == entry.id

    assert engine.remove_entry(2023, 5, entry.id)
    assert engine.search("lyon") == []


def test_select_records_history(config, engine):
    engine.add_entry(2023, 5, "Paris")
    action = engine.select("paris", 0)

    assert action.type == ResultType.ENTRY
    assert action.year == 2023
    assert engine.history.items == ["paris"]
    assert TravelLogEngine(config).get_statistics()["history_size"] == 1


def test_select_without_results(engine):
    assert engine.select("nothing here", 0) is None
    assert len(engine.history) == 0


def test_session_round_trip(config, engine, scheduler):
    engine.add_entry(2023, 8, "Tokyo", "Fall vacation in Japan")
    selected = []
    session = engine.create_session(scheduler=scheduler, on_select=selected.append)

    session.open()
    session.input("tokyo")
    scheduler.advance(0.2)
    assert session.state.status == SessionStatus.OPEN_WITH_RESULTS

    session.handle_key("ArrowDown")
    action = session.handle_key("Enter")
    assert selected == [action]
    assert action.month == 8
    assert TravelLogEngine(config).get_statistics()["history_size"] == 1


def test_export_and_import(tmp_path, engine):
    engine.add_entry(2023, 5, "Paris")
    export_path = engine.export_data(tmp_path / "export.json")

    other = TravelLogEngine(Config(storage_path=tmp_path / "other"))
    assert other.import_data(Path(export_path)) == 1
    assert other.get_statistics()["total_entries"] == 1


if __name__ == "__main__":
    pytest.main([__file__])
