from __future__ import annotations

import pytest

from pdfeditx.config import DEFAULT_SETTINGS, MAX_FILE_SIZE, EditorSettings


def test_defaults() -> None:
    assert DEFAULT_SETTINGS.max_file_size == MAX_FILE_SIZE == 50 * 1024 * 1024
    assert DEFAULT_SETTINGS.accepted_content_type == "application/pdf"
    assert DEFAULT_SETTINGS.thumbnail_scale == 1.5
    assert DEFAULT_SETTINGS.render_thumbnails is True
    assert DEFAULT_SETTINGS.redaction_color == (0.0, 0.0, 0.0)
    assert DEFAULT_SETTINGS.compress_on_download is False


def test_from_env_without_variables_returns_defaults() -> None:
    assert EditorSettings.from_env({}) == EditorSettings()


def test_from_env_overrides() -> None:
    settings = EditorSettings.from_env(
        {
            "PDFEDITX_MAX_FILE_SIZE": "1024",
            "PDFEDITX_THUMBNAIL_SCALE": "0.5",
            "PDFEDITX_RENDER_THUMBNAILS": "no",
            "PDFEDITX_REDACTION_COLOR": "1, 0.5, 0",
            "PDFEDITX_MIN_REDACTION_SIZE": "4",
            "PDFEDITX_COMPRESS_ON_DOWNLOAD": "true",
        }
    )

    assert settings.max_file_size == 1024
    assert settings.thumbnail_scale == 0.5
    assert settings.render_thumbnails is False
    assert settings.redaction_color == (1.0, 0.5, 0.0)
    assert settings.min_redaction_size == 4.0
    assert settings.compress_on_download is True


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PDFEDITX_MAX_FILE_SIZE", "2048")

    assert EditorSettings.from_env().max_file_size == 2048


@pytest.mark.parametrize("value", ["1,0", "2,0,0", "red,green,blue"])
def test_invalid_redaction_color(value: str) -> None:
    with pytest.raises(ValueError):
        EditorSettings.from_env({"PDFEDITX_REDACTION_COLOR": value})
