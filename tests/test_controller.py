"""Tests for the form state controller."""

import random
from unittest.mock import Mock, patch

import pyperclip
import pytest

from passgen import CHARACTER_CLASSES
from passgen.controller import (
    DEFAULT_LENGTH,
    MASK_CHAR,
    MAX_LENGTH,
    MIN_LENGTH,
    FormState,
    PasswordForm,
)


# ── Length slider ──────────────────────────────────────────────────────────


class TestSetLength:
    def test_default(self):
        assert PasswordForm(clipboard=Mock()).state.length == DEFAULT_LENGTH

    @pytest.mark.parametrize("value,expected", [
        (MIN_LENGTH, MIN_LENGTH),
        (20, 20),
        (MAX_LENGTH, MAX_LENGTH),
        (3, MIN_LENGTH),
        (100, MAX_LENGTH),
    ])
    def test_clamped(self, value, expected):
        form = PasswordForm(clipboard=Mock())
        assert form.set_length(value) == expected
        assert form.state.length == expected


# ── Generate / display ─────────────────────────────────────────────────────


class TestGenerate:
    def test_stores_password_of_slider_length(self):
        form = PasswordForm(clipboard=Mock())
        form.set_length(20)
        pwd = form.generate()
        assert form.state.password == pwd
        assert len(pwd) == 20
        for cls in CHARACTER_CLASSES:
            assert any(ch in cls.characters for ch in pwd)

    def test_uses_injected_random_source(self):
        a = PasswordForm(clipboard=Mock(), randbelow=random.Random(7).randrange)
        b = PasswordForm(clipboard=Mock(), randbelow=random.Random(7).randrange)
        assert a.generate() == b.generate()

    def test_strength_follows_password(self):
        form = PasswordForm(clipboard=Mock())
        assert form.strength.score == 0
        form.generate()
        assert form.strength.score == 5
        assert form.strength.label == "Very strong password"

    def test_masked_by_default(self):
        form = PasswordForm(clipboard=Mock())
        form.generate()
        assert form.displayed_password == MASK_CHAR * DEFAULT_LENGTH

    def test_toggle_visibility(self):
        form = PasswordForm(clipboard=Mock())
        form.generate()
        assert form.toggle_visibility() is True
        assert form.displayed_password == form.state.password
        assert form.toggle_visibility() is False
        assert form.displayed_password != form.state.password

    def test_existing_state(self):
        state = FormState(password="abcdefgh", visible=True, length=16)
        form = PasswordForm(clipboard=Mock(), state=state)
        assert form.displayed_password == "abcdefgh"
        assert form.strength.score == 2


# ── Copy ───────────────────────────────────────────────────────────────────


class TestCopy:
    def test_success(self):
        clipboard = Mock()
        form = PasswordForm(clipboard=clipboard)
        pwd = form.generate()
        note = form.copy()
        clipboard.assert_called_once_with(pwd)
        assert note.ok is True
        assert note.message == "Password copied to clipboard!"

    def test_empty_password_not_copied(self):
        clipboard = Mock()
        note = PasswordForm(clipboard=clipboard).copy()
        clipboard.assert_not_called()
        assert note.ok is False

    def test_failure_is_reported(self):
        clipboard = Mock(side_effect=pyperclip.PyperclipException("no clipboard"))
        form = PasswordForm(clipboard=clipboard)
        pwd = form.generate()
        before = FormState(**vars(form.state))

        note = form.copy()

        assert note.ok is False
        assert "no clipboard" in note.message
        assert form.state == before
        assert form.state.password == pwd

    def test_failure_is_logged(self, caplog):
        form = PasswordForm(clipboard=Mock(side_effect=OSError("denied")))
        form.generate()
        with caplog.at_level("WARNING", logger="passgen.controller"):
            form.copy()
        assert "denied" in caplog.text

    @patch("passgen.controller.pyperclip.copy")
    def test_defaults_to_pyperclip(self, mock_copy):
        form = PasswordForm()
        pwd = form.generate()
        assert form.copy().ok is True
        mock_copy.assert_called_once_with(pwd)
