"""Tests for per-session state."""

import pytest

from photobooth.domain.modes import ModeKey
from photobooth.services.session import PhotoSession


def test_session_defaults_to_first_catalog_mode() -> None:
    session = PhotoSession()

    assert session.active_mode is ModeKey.CARTOON
    assert session.custom_instruction == ""


def test_set_mode_changes_current_instruction(session: PhotoSession) -> None:
    session.set_mode("anime")

    assert session.active_mode is ModeKey.ANIME
    assert "anime" in session.current_instruction()


def test_custom_mode_uses_custom_instruction(session: PhotoSession) -> None:
    session.set_mode(ModeKey.CUSTOM)
    session.set_custom_instruction("Put the person on the moon")

    assert session.current_instruction() == "Put the person on the moon"


def test_set_mode_rejects_unknown_key(session: PhotoSession) -> None:
    with pytest.raises(ValueError):
        session.set_mode("sepia")

    assert session.active_mode is ModeKey.CARTOON


def test_close_custom_editor_falls_back_when_blank(session: PhotoSession) -> None:
    session.set_mode(ModeKey.CUSTOM)
    session.set_custom_instruction("   ")

    assert session.close_custom_editor() is ModeKey.CARTOON


def test_close_custom_editor_keeps_custom_with_text(session: PhotoSession) -> None:
    session.set_mode(ModeKey.CUSTOM)
    session.set_custom_instruction("Give them a crown")

    assert session.close_custom_editor() is ModeKey.CUSTOM


def test_independent_sessions_do_not_share_state() -> None:
    first = PhotoSession()
    second = PhotoSession()

    first.set_mode(ModeKey.OLD)
    first.store.capture(b"frame", first.active_mode)

    assert second.active_mode is ModeKey.CARTOON
    assert second.store.list() == ()


def test_close_custom_editor_returns_to_configured_default() -> None:
    session = PhotoSession(default_mode=ModeKey.COMIC)
    assert session.active_mode is ModeKey.COMIC

    session.set_mode(ModeKey.CUSTOM)

    assert session.close_custom_editor() is ModeKey.COMIC
