# tests/engine/scoring/test_properties.py
"""
Propriétés du moteur de scoring vérifiées avec Hypothesis.

    - DISC : permutation de {1,2,3,4} par question → Σ totaux = 10 × questions
    - DISC : profil = deux lettres distinctes, les deux totaux les plus hauts
    - average : ajouter une réponse égale à la moyenne ne la change pas
    - Pondération : poids = 100, toutes les catégories à S → score final S
    - Détection : "DISC perfil comportamental" dans n'importe quelle casse
"""
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from app.engine.scoring.calculator import calculate_result, disc_profile, DISC_ORDER
from app.engine.scoring.detector import detect_test_type
from app.shared.enums import TestType
from tests.conftest import (
    make_question,
    make_category,
    make_structure,
    disc_structure,
)

pytestmark = pytest.mark.engine

DETECTION_KEYWORDS = [
    "disc", "comportamental", "senioridade", "def", "whatsapp",
    "valores", "8d", "liderança", "leadership",
]


# ── Stratégies ────────────────────────────────────────────────────────────────

rank_permutation_st = st.permutations([1, 2, 3, 4])

disc_totals_st = st.fixed_dictionaries(
    {dim: st.integers(min_value=0, max_value=96) for dim in DISC_ORDER}
)


@st.composite
def weights_st(draw):
    """Liste de poids entiers strictement positifs dont la somme vaut 100."""
    n = draw(st.integers(min_value=1, max_value=6))
    cuts = sorted(draw(st.lists(
        st.integers(min_value=1, max_value=99), min_size=n - 1, max_size=n - 1, unique=True,
    )))
    bounds = [0] + cuts + [100]
    return [bounds[i + 1] - bounds[i] for i in range(n)]


# ── DISC ──────────────────────────────────────────────────────────────────────

@settings(max_examples=100, deadline=None)
@given(st.lists(rank_permutation_st, min_size=1, max_size=30))
def test_disc_somme_des_totaux(permutations):
    answers = {
        f"q{i}": dict(zip(DISC_ORDER, perm))
        for i, perm in enumerate(permutations, start=1)
    }
    result = calculate_result(TestType.DISC, answers, disc_structure(len(permutations)))
    assert sum(result.scores.values()) == 10 * len(permutations)


@settings(max_examples=300)
@given(disc_totals_st)
def test_disc_profil_deux_plus_hautes(totals):
    profile = disc_profile(totals)
    first, second = profile[0], profile[1]

    assert first != second
    assert {first, second} <= set(DISC_ORDER)
    others = [d for d in DISC_ORDER if d not in profile]
    assert totals[first] >= totals[second] >= max(totals[d] for d in others)
    # Égalité : la dimension la plus tôt dans D > I > S > C passe devant
    if totals[first] == totals[second]:
        assert DISC_ORDER.index(first) < DISC_ORDER.index(second)
    for d in others:
        if totals[d] == totals[second]:
            assert DISC_ORDER.index(second) < DISC_ORDER.index(d)


# ── Moyenne ───────────────────────────────────────────────────────────────────

@settings(max_examples=100)
@given(st.lists(st.integers(min_value=1, max_value=5), min_size=1, max_size=10))
def test_average_stable_si_ajout_de_la_moyenne(values):
    questions = [make_question(f"q{i}") for i in range(len(values) + 1)]
    structure = make_structure(categories=[make_category("c1", questions)], method="average")
    answers = {f"q{i}": v for i, v in enumerate(values)}

    before = calculate_result(TestType.SENIORITY_SELLER, answers, structure)
    answers[f"q{len(values)}"] = sum(values) / len(values)
    after = calculate_result(TestType.SENIORITY_SELLER, answers, structure)

    assert after.score == pytest.approx(before.score, abs=0.01)


# ── Pondération ───────────────────────────────────────────────────────────────

@settings(max_examples=100)
@given(
    weights=weights_st(),
    score=st.integers(min_value=1, max_value=5),
    method=st.sampled_from(["weighted_average", "weighted_sum"]),
)
def test_ponderation_toutes_categories_a_s(weights, score, method):
    categories = [
        make_category(f"c{i}", [make_question(f"c{i}_q")]) for i in range(len(weights))
    ]
    structure = make_structure(
        categories=categories,
        method=method,
        category_weights={f"c{i}": w for i, w in enumerate(weights)},
    )
    answers = {f"c{i}_q": score for i in range(len(weights))}

    result = calculate_result(TestType.SENIORITY_SELLER, answers, structure)
    assert result.score == pytest.approx(score, abs=0.01)


# ── Détection ─────────────────────────────────────────────────────────────────

@settings(max_examples=100)
@given(st.lists(st.booleans(), min_size=26, max_size=26))
def test_detection_disc_toute_casse(flips):
    name = "".join(
        c.upper() if flip else c.lower()
        for c, flip in zip("DISC perfil comportamental", flips)
    )
    assert detect_test_type({"metadata": {"name": name}}) == TestType.DISC


@settings(max_examples=200)
@given(st.text(max_size=40).filter(
    lambda n: not any(k in n.lower() for k in DETECTION_KEYWORDS)
))
def test_detection_nom_inconnu_none(name):
    assert detect_test_type({"metadata": {"name": name}}) is None
