"""Tests for the Streamlit page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from passmeter import CHARACTER_CLASSES, evaluate

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def at():
    app = AppTest.from_file(APP, default_timeout=30)
    app.run()
    assert not app.exception
    return app


def _history(at):
    return at.session_state["history"].list()


def _check(at, password):
    at.text_input(key="password").input(password).run()
    assert not at.exception


class TestCheckTab:
    def test_empty_input_shows_tip(self, at):
        assert at.info[0].value == evaluate("").tip
        assert _history(at) == []

    def test_scored_password_is_recorded(self, at):
        _check(at, "Abc12345")
        entries = _history(at)
        assert [(e.password, e.level, e.score) for e in entries] == [
            ("Abc12345", "Good", 4),
        ]
        assert any("Ab****45" in m.value for m in at.markdown)

    def test_empty_input_is_not_recorded(self, at):
        _check(at, "Abc12345")
        _check(at, "")
        assert [e.password for e in _history(at)] == ["Abc12345"]

    def test_unrelated_rerun_keeps_entry(self, at):
        _check(at, "Abc12345")
        before = _history(at)
        at.slider(key="length").set_value(20).run()
        at.button(key="generate").click().run()
        assert _history(at) == before

    def test_retyping_after_clearing_field_records_again(self, at):
        _check(at, "Abc12345")
        at.button(key="clear_history").click().run()
        _check(at, "")
        _check(at, "Abc12345")
        assert [e.password for e in _history(at)] == ["Abc12345"]


class TestHistoryTab:
    def test_clear_button_empties_history(self, at):
        _check(at, "first123")
        _check(at, "Abc12345")
        assert len(_history(at)) == 2

        at.button(key="clear_history").click().run()
        assert not at.exception
        assert _history(at) == []
        assert not any("Ab****45" in m.value for m in at.markdown)

    def test_clear_survives_following_reruns(self, at):
        _check(at, "Abc12345")
        at.button(key="clear_history").click().run()
        at.slider(key="length").set_value(30).run()
        assert _history(at) == []


class TestGenerateTab:
    def test_generates_password(self, at):
        at.slider(key="length").set_value(20).run()
        at.button(key="generate").click().run()
        assert not at.error
        assert len(at.code[0].value) == 20

    def test_no_classes_shows_error(self, at):
        for name in CHARACTER_CLASSES:
            at.checkbox(key=f"class_{name}").uncheck()
        at.button(key="generate").click().run()
        assert at.error[0].value == "Select at least one character type!"
        assert len(at.code) == 0
