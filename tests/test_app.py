"""Smoke tests for the Streamlit page."""

import os

import pytest
from streamlit.testing.v1 import AppTest

from blackbody.formatting import format_wavelength
from blackbody.physics import wien_displacement_law

APP_PATH = os.path.join(os.path.dirname(__file__), "..", "Blackbody_Radiation.py")


@pytest.fixture
def app(clean_logger):
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    return at


def test_app_renders_default_temperature(app) -> None:
    assert not app.exception
    assert app.session_state["temperature"] == 6000
    assert app.metric[0].value == format_wavelength(wien_displacement_law(6000))


def test_preset_below_slider_range(app) -> None:
    cosmic = next(b for b in app.button if b.label == "Cosmic Background")
    cosmic.click().run()
    assert not app.exception
    assert app.session_state["temperature"] == 2.7
    assert app.slider[0].value == 100
