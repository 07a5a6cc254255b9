# tests/content/test_disc_profiles.py
import pytest

from app.content.disc_profiles import (
    get_disc_profile,
    DISC_SINGLE_PROFILES,
    DISC_COMBINED_PROFILES,
)

pytestmark = pytest.mark.engine


def test_quatre_profils_simples():
    assert set(DISC_SINGLE_PROFILES) == {"D", "I", "S", "C"}


def test_six_profils_combines():
    assert len(DISC_COMBINED_PROFILES) == 6
    assert all(len(pair) == 2 for pair in DISC_COMBINED_PROFILES)


def test_profil_simple():
    profile = get_disc_profile("D")
    assert profile["code"] == "D"
    assert profile["name"] == "O Competidor (Dominância)"


def test_ordre_des_lettres_indifferent():
    assert get_disc_profile("ID")["name"] == get_disc_profile("DI")["name"]


def test_code_normalise():
    assert get_disc_profile(" di ")["code"] == "DI"


@pytest.mark.parametrize("code", ["DD", "X", "", "DIS", None])
def test_code_inconnu_none(code):
    assert get_disc_profile(code) is None


@pytest.mark.parametrize("code", ["D", "I", "S", "C", "DI", "DC", "DS", "IS", "IC", "SC"])
def test_contenu_complet(code):
    profile = get_disc_profile(code)
    assert profile["description"]
    assert profile["strengths"]
    assert profile["development_areas"]
    assert profile["ideal_roles"]
