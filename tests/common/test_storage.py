from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from brushwork.config import ConfigurationError, get_database_config, get_storage_config
from brushwork.config.storage import DEFAULT_DB_FILENAME


def test_storage_config_prefers_explicit_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("BRUSHWORK_DATA_DIR", str(custom))
    monkeypatch.setenv("BRUSHWORK_DB_FILENAME", "catalog.sqlite")

    result = get_storage_config().database_path

    assert result == custom.resolve() / "catalog.sqlite"
    assert not custom.exists()


def test_database_config_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "postgresql+psycopg://localhost/brushwork")
    monkeypatch.delenv("BRUSHWORK_DB_ECHO", raising=False)

    config = get_database_config()

    assert config.uri == "postgresql+psycopg://localhost/brushwork"
    assert not config.is_sqlite
    assert config.echo is False


def test_database_config_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.delenv("BRUSHWORK_DB_FILENAME", raising=False)
    monkeypatch.setenv("BRUSHWORK_DATA_DIR", str(tmp_path / "data-dir"))

    config = get_database_config()

    expected_path = (tmp_path / "data-dir" / DEFAULT_DB_FILENAME).resolve()
    assert config.uri == f"sqlite+pysqlite:///{expected_path}"
    assert config.is_sqlite
    assert expected_path.parent.exists()


def test_database_config_falls_back_to_xdg_data_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.delenv("BRUSHWORK_DATA_DIR", raising=False)
    monkeypatch.delenv("BRUSHWORK_DB_FILENAME", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    uri = get_database_config().uri

    assert uri.endswith(f"brushwork/{DEFAULT_DB_FILENAME}")
    assert (tmp_path / "brushwork").is_dir()


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False)])
def test_database_echo_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")
    monkeypatch.setenv("BRUSHWORK_DB_ECHO", raw)

    assert get_database_config().echo is expected


def test_database_echo_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")
    monkeypatch.setenv("BRUSHWORK_DB_ECHO", "sometimes")

    with pytest.raises(ConfigurationError, match="BRUSHWORK_DB_ECHO"):
        get_database_config()
