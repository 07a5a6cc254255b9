# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Trois couches :
    1. Engine  — fonctions pures, aucun mock nécessaire (factories de structures JSON)
    2. Service — appels directs, engine patché via pytest-mock si besoin
    3. Router  — httpx.AsyncClient sur l'app FastAPI
"""
import pytest

from httpx import AsyncClient, ASGITransport

from app.main import app
from app.shared.enums import ScoringMethod

DISC_DIMENSIONS = ["D", "I", "S", "C"]


# ── Questions ─────────────────────────────────────────────────────────────────

def make_question(id: str = "q1", **kwargs) -> dict:
    """Question d'échelle 1..5 par défaut (scale_descriptors)."""
    defaults = {
        "id": id,
        "text": f"Question {id}",
        "type": "scale",
        "order": 0,
        "required": True,
        "scale_descriptors": [{"value": v, "label": str(v)} for v in range(1, 6)],
    }
    defaults.update(kwargs)
    return defaults


def make_choice_question(id: str = "q1", values=(0, 1, 2, 3), **kwargs) -> dict:
    defaults = {
        "id": id,
        "text": f"Question {id}",
        "type": "single_choice",
        "options": [
            {"id": f"{id}_o{i}", "label": f"Option {i}", "value": v, "order": i}
            for i, v in enumerate(values)
        ],
    }
    defaults.update(kwargs)
    return defaults


def make_matrix_question(id: str = "q1", unique_values: bool = True, **kwargs) -> dict:
    """Question DISC : 4 affirmations (label = dimension), rangs 1..4."""
    defaults = {
        "id": id,
        "text": f"Question {id}",
        "type": "matrix_rating",
        "matrix_config": {
            "statements": [
                {
                    "id": f"{id}_{dim.lower()}",
                    "label": dim,
                    "text": f"Affirmation {dim}",
                    "order": i,
                    "metadata": {"profile": dim},
                }
                for i, dim in enumerate(DISC_DIMENSIONS)
            ],
            "scale": {"min": 1, "max": 4},
            "validation": {"unique_values": unique_values},
        },
    }
    defaults.update(kwargs)
    return defaults


# ── Catégories / structures ───────────────────────────────────────────────────

def make_category(id: str = "cat1", questions=None, **kwargs) -> dict:
    defaults = {
        "id": id,
        "name": f"Catégorie {id}",
        "order": 0,
        "questions": questions if questions is not None else [make_question(f"{id}_q1")],
    }
    defaults.update(kwargs)
    return defaults


def make_structure(name: str = "Teste", categories=None, **scoring) -> dict:
    """Structure JSON complète ; les kwargs alimentent le bloc scoring."""
    scoring.setdefault("method", ScoringMethod.SUM.value)
    return {
        "metadata": {"name": name, "description": ""},
        "categories": categories if categories is not None else [make_category()],
        "scoring": scoring,
    }


def disc_structure(n_questions: int = 24) -> dict:
    questions = [make_matrix_question(f"q{i}") for i in range(1, n_questions + 1)]
    return make_structure(
        name="DISC perfil comportamental",
        categories=[make_category("disc", questions, name="DISC")],
    )


def disc_answers(n_questions: int = 24, ranks=None) -> dict:
    """Réponses matricielles clés par label de dimension."""
    ranks = ranks or {"D": 4, "I": 3, "S": 2, "C": 1}
    return {f"q{i}": dict(ranks) for i in range(1, n_questions + 1)}


def weighted_structure(name: str = "Senioridade Vendedor", **scoring) -> dict:
    """Deux catégories pondérées 60/40, questions 1..5."""
    scoring.setdefault("method", ScoringMethod.WEIGHTED_AVERAGE.value)
    scoring.setdefault("category_weights", {"a": 60, "b": 40})
    return make_structure(
        name=name,
        categories=[
            make_category("a", [make_question("a1"), make_question("a2")], name="Prospecção"),
            make_category("b", [make_question("b1"), make_question("b2")], name="Fechamento"),
        ],
        **scoring,
    )


# ── Client HTTP ───────────────────────────────────────────────────────────────

@pytest.fixture
async def client():
    """Client HTTP sur l'app — aucune dépendance à surcharger (pas d'auth, pas de DB)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
