import json
import logging

from config import PNG_TYPE, STRING_TYPE, SUPPORTED_TYPES
from models import ClipboardSettings
from state_manager import ClipStateStore


def test_missing_file_gives_defaults(tmp_path):
    settings = ClipStateStore(str(tmp_path / "none.json")).load()
    assert settings == ClipboardSettings()
    assert settings.enabled_types == SUPPORTED_TYPES
    assert settings.play_sounds is True


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "state.json"
    store = ClipStateStore(str(path))
    settings = ClipboardSettings(
        enabled_types=frozenset({STRING_TYPE}),
        ignored_types=frozenset({"com.example.secret"}),
        ignore_events=True,
        play_sounds=False,
    )
    store.save(settings)

    assert path.exists()
    assert store.load() == settings


def test_invalid_fields_fall_back_individually(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({
        "enabled_types": [PNG_TYPE, "public.html"],
        "ignored_types": "not-a-list",
        "ignore_events": "yes",
        "play_sounds": False,
    }), encoding="utf-8")

    settings = ClipStateStore(str(path)).load()
    assert settings.enabled_types == frozenset({PNG_TYPE})
    assert settings.ignored_types == frozenset()
    assert settings.ignore_events is False
    assert settings.play_sounds is False


def test_corrupt_file_logs_and_returns_defaults(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    logger = logging.getLogger("clipwatch-test")

    with caplog.at_level(logging.DEBUG, logger="clipwatch-test"):
        settings = ClipStateStore(str(path), logger).load()

    assert settings == ClipboardSettings()
    assert "Failed to load state" in caplog.text
