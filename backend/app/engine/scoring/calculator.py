# engine/scoring/calculator.py
"""
Calcul des résultats d'évaluation — ZÉRO accès DB, ZÉRO I/O.
Reçoit la structure du test (JSON) et les réponses, retourne un résultat typé.

Appelé par :
    modules/assessment/service.py      (soumission, type connu)
    modules/test_structure/service.py  (preview temps réel, type détecté)

Deux issues possibles seulement :
    - un ScoringResult (variante propre au type de test)
    - None → "pas encore calculable" (type inconnu, aucune réponse)

Une configuration incomplète (structure en cours d'édition) ne lève jamais
d'exception : scores à 0, aucune tranche trouvée.

Format des réponses :
    {
        "q_scale_1": 4,                                  # question scalaire
        "q_disc_1": {"D": 4, "I": 3, "S": 2, "C": 1},    # matrix_rating
    }
    La clé d'affirmation peut être son id, son label ou metadata.profile.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from app.shared.enums import DiscDimension, QuestionType, ScoringMethod, TestType

# --- SEUILS ---
WEIGHT_PERCENT_BASE = 100.0
THRESHOLD_SENIORITY_PLENO = 50
THRESHOLD_SENIORITY_SENIOR = 80
LEVEL_NOT_FOUND = "N/A"
STYLE_NOT_FOUND = "Indefinido"

DISC_ORDER = [d.value for d in DiscDimension]   # D > I > S > C au départage

NON_SCORED_TYPES = {QuestionType.TEXT.value, QuestionType.TEXTAREA.value}


# ── Dataclasses de résultat ───────────────────────────────────────────────────

@dataclass
class ScoredItem:
    """Une question (ou affirmation DISC) notée."""
    id:        str
    name:      str
    score:     float
    max_score: float
    category:  Optional[str] = None


@dataclass
class CategoryScore:
    id:         str
    name:       str
    score:      float
    max_score:  float
    percentage: float
    weight:     Optional[float] = None   # renseigné pour les méthodes pondérées
    items:      List[ScoredItem] = field(default_factory=list)


@dataclass
class DiscResult:
    """
    scores   → {D, I, S, C} somme des rangs par dimension
    profile  → deux dimensions dominantes, ex: "DI"
    """
    test_type:    str
    scores:       Dict[str, float]
    profile:      str
    items:        List[ScoredItem] = field(default_factory=list)
    completed_at: Optional[datetime] = None


@dataclass
class SeniorityResult:
    test_type:   str
    score:       float
    max_score:   float
    percentage:  float
    level:       str
    description: str = ""
    categories:  List[CategoryScore] = field(default_factory=list)
    items:       List[ScoredItem] = field(default_factory=list)


@dataclass
class LeadershipStyleResult:
    test_type:   str
    score:       float
    max_score:   float
    percentage:  float
    style:       str
    description: str = ""


@dataclass
class DefMethodResult:
    test_type:         str
    global_score:      float
    global_max:        float
    global_percentage: float
    level:             Optional[str] = None
    categories:        List[CategoryScore] = field(default_factory=list)


@dataclass
class Values8DResult:
    test_type:  str
    dimensions: Dict[str, float]          # {nom de catégorie: moyenne}
    items:      List[ScoredItem] = field(default_factory=list)


ScoringResult = Union[
    DiscResult, SeniorityResult, LeadershipStyleResult, DefMethodResult, Values8DResult
]


@dataclass
class _Aggregate:
    """Résultat intermédiaire de l'agrégation par catégorie."""
    score:      float
    max_score:  float
    percentage: float
    categories: List[CategoryScore]
    items:      List[ScoredItem]
    raw_score:  float               # non arrondi, sert au classement


# ── Point d'entrée ────────────────────────────────────────────────────────────

def calculate_result(
    test_type: Union[TestType, str],
    answers: Optional[Mapping[str, Any]],
    config: Optional[Mapping[str, Any]],
) -> Optional[ScoringResult]:
    """
    Calcule le résultat d'un test à partir des réponses brutes.

    Args:
        test_type : un des six types (TestType ou sa valeur)
        answers   : {question_id: valeur} ou {question_id: {affirmation: valeur}}
        config    : sous-ensemble {categories, scoring} de la structure du test

    Returns:
        La variante de résultat du type, ou None si non calculable.
    """
    if not answers:
        return None

    key = test_type.value if isinstance(test_type, TestType) else str(test_type)
    handler = _HANDLERS.get(key)
    if handler is None:
        return None

    return handler(key, answers, config if isinstance(config, Mapping) else {})


# ── DISC ──────────────────────────────────────────────────────────────────────

def _calculate_disc(test_type: str, answers: Mapping[str, Any], config: Mapping) -> DiscResult:
    scoring = _as_dict(config.get("scoring"))
    totals = {dim: 0.0 for dim in DISC_ORDER}
    items: List[ScoredItem] = []

    for category in _as_list(config.get("categories")):
        for question in _as_list(_as_dict(category).get("questions")):
            question = _as_dict(question)
            matrix = _as_dict(question.get("matrix_config"))
            statements = _as_list(matrix.get("statements"))
            if not statements:
                continue

            ranks = answers.get(str(question.get("id")))
            if not isinstance(ranks, Mapping):
                continue

            max_score = get_max_score(question, scoring)
            for statement in statements:
                statement = _as_dict(statement)
                dimension = _statement_dimension(statement)
                if dimension is None:
                    continue

                value = _lookup_statement_value(ranks, statement, dimension)
                if value is None:
                    continue

                totals[dimension] += value
                items.append(ScoredItem(
                    id=f"{question.get('id')}:{statement.get('id')}",
                    name=str(statement.get("text") or statement.get("id")),
                    score=value,
                    max_score=max_score,
                    category=dimension,
                ))

    return DiscResult(
        test_type=test_type,
        scores=totals,
        profile=disc_profile(totals),
        items=items,
    )


def disc_profile(totals: Mapping[str, float]) -> str:
    """
    Deux dimensions les plus élevées, concaténées.
    Égalité départagée par l'ordre fixe D > I > S > C.
    """
    ranked = sorted(
        DISC_ORDER,
        key=lambda dim: (-totals.get(dim, 0.0), DISC_ORDER.index(dim)),
    )
    return ranked[0] + ranked[1]


def _statement_dimension(statement: Mapping) -> Optional[str]:
    profile = _as_dict(statement.get("metadata")).get("profile")
    for candidate in (profile, statement.get("label")):
        if isinstance(candidate, str) and candidate.strip().upper() in DISC_ORDER:
            return candidate.strip().upper()
    return None


def _lookup_statement_value(
    ranks: Mapping[str, Any], statement: Mapping, dimension: str
) -> Optional[float]:
    for key in (statement.get("id"), statement.get("label"), dimension):
        if key is not None and str(key) in ranks:
            return _to_number(ranks[str(key)])
    return None


# ── Séniorité (vendeur / leader) ──────────────────────────────────────────────

def _calculate_seniority(test_type: str, answers: Mapping[str, Any], config: Mapping) -> SeniorityResult:
    scoring = _as_dict(config.get("scoring"))
    agg = _aggregate(answers, config, default_method=ScoringMethod.SUM)

    level, description = LEVEL_NOT_FOUND, ""
    bands = _bands(scoring, legacy_key="seniority_levels")
    if bands is not None:
        found = find_range(bands, agg.raw_score)
        if found:
            level, description = found["label"], found["description"]
    else:
        level = _fallback_seniority_level(agg.percentage)

    return SeniorityResult(
        test_type=test_type,
        score=agg.score,
        max_score=agg.max_score,
        percentage=agg.percentage,
        level=level,
        description=description,
        categories=agg.categories,
        items=agg.items,
    )


def _fallback_seniority_level(percentage: float) -> str:
    if percentage < THRESHOLD_SENIORITY_PLENO:
        return "Júnior"
    if percentage < THRESHOLD_SENIORITY_SENIOR:
        return "Pleno"
    return "Sênior"


# ── Style de leadership ───────────────────────────────────────────────────────

def _calculate_leadership(test_type: str, answers: Mapping[str, Any], config: Mapping) -> LeadershipStyleResult:
    scoring = _as_dict(config.get("scoring"))
    agg = _aggregate(answers, config, default_method=ScoringMethod.SUM)

    style, description = STYLE_NOT_FOUND, ""
    bands = _bands(scoring, legacy_key="results")
    if bands is not None:
        found = find_range(bands, agg.raw_score)
        if found:
            style, description = found["label"], found["description"]

    return LeadershipStyleResult(
        test_type=test_type,
        score=agg.score,
        max_score=agg.max_score,
        percentage=agg.percentage,
        style=style,
        description=description,
    )


# ── Méthode DEF ───────────────────────────────────────────────────────────────

def _calculate_def_method(test_type: str, answers: Mapping[str, Any], config: Mapping) -> DefMethodResult:
    scoring = _as_dict(config.get("scoring"))
    agg = _aggregate(answers, config, default_method=ScoringMethod.SUM)

    level = None
    bands = _bands(scoring)
    if bands is not None:
        found = find_range(bands, agg.raw_score)
        level = found["label"] if found else LEVEL_NOT_FOUND

    return DefMethodResult(
        test_type=test_type,
        global_score=agg.score,
        global_max=agg.max_score,
        global_percentage=agg.percentage,
        level=level,
        categories=agg.categories,
    )


# ── 8 Dimensions de valeurs ───────────────────────────────────────────────────

def _calculate_values_8d(test_type: str, answers: Mapping[str, Any], config: Mapping) -> Values8DResult:
    scoring = _as_dict(config.get("scoring"))
    dimensions: Dict[str, float] = {}
    items: List[ScoredItem] = []

    for category in _as_list(config.get("categories")):
        category = _as_dict(category)
        name = str(category.get("name") or category.get("id") or "")
        values = []

        for question in _scored_questions(category):
            value = _to_number(answers.get(str(question.get("id"))))
            items.append(ScoredItem(
                id=str(question.get("id")),
                name=str(question.get("text") or question.get("id")),
                score=value or 0.0,
                max_score=get_max_score(question, scoring),
                category=name,
            ))
            if value is not None:
                values.append(value)

        dimensions[name] = round(sum(values) / len(values), 1) if values else 0.0

    return Values8DResult(test_type=test_type, dimensions=dimensions, items=items)


# ── Agrégation générique par catégorie ────────────────────────────────────────

def _aggregate(
    answers: Mapping[str, Any],
    config: Mapping,
    default_method: ScoringMethod,
) -> _Aggregate:
    """
    Agrège les réponses selon scoring.method.

    sum              → Σ des valeurs répondues
    average          → moyenne des valeurs répondues (non répondues exclues)
    weighted_sum     → Σ_c somme_c × poids_c / 100
    weighted_average → Σ_c moyenne_c × poids_c / 100
    custom / absent  → méthode native du type de test

    Le maximum atteignable suit la même agrégation sur les maxima par question :
    toutes les questions notées pour les méthodes par somme, seulement les
    questions répondues pour les méthodes par moyenne.
    """
    scoring = _as_dict(config.get("scoring"))
    method = _resolve_method(scoring.get("method"), default_method)
    averaged = method in (ScoringMethod.AVERAGE, ScoringMethod.WEIGHTED_AVERAGE)
    weighted = method in (ScoringMethod.WEIGHTED_SUM, ScoringMethod.WEIGHTED_AVERAGE)
    weights = _as_dict(scoring.get("category_weights"))

    categories: List[CategoryScore] = []
    items: List[ScoredItem] = []
    all_values: List[float] = []
    all_maxima: List[float] = []
    weighted_score = 0.0
    weighted_max = 0.0

    for category in _as_list(config.get("categories")):
        category = _as_dict(category)
        cat_id = str(category.get("id") or "")
        cat_name = str(category.get("name") or cat_id)
        values: List[float] = []
        maxima: List[float] = []
        cat_items: List[ScoredItem] = []

        for question in _scored_questions(category):
            value = _to_number(answers.get(str(question.get("id"))))
            q_max = get_max_score(question, scoring)
            cat_items.append(ScoredItem(
                id=str(question.get("id")),
                name=str(question.get("text") or question.get("id")),
                score=value or 0.0,
                max_score=q_max,
                category=cat_name,
            ))
            if value is not None:
                values.append(value)
            if value is not None or not averaged:
                maxima.append(q_max)

        if averaged:
            cat_score = sum(values) / len(values) if values else 0.0
            cat_max = sum(maxima) / len(maxima) if maxima else 0.0
        else:
            cat_score = sum(values)
            cat_max = sum(maxima)

        weight = None
        if weighted:
            weight = _to_number(weights.get(cat_id)) or 0.0
            weighted_score += cat_score * weight / WEIGHT_PERCENT_BASE
            weighted_max += cat_max * weight / WEIGHT_PERCENT_BASE

        categories.append(CategoryScore(
            id=cat_id,
            name=cat_name,
            score=round(cat_score, 2),
            max_score=round(cat_max, 2),
            percentage=_percentage(cat_score, cat_max),
            weight=weight,
            items=cat_items,
        ))
        items.extend(cat_items)
        all_values.extend(values)
        all_maxima.extend(maxima)

    if weighted:
        score, max_score = weighted_score, weighted_max
    elif averaged:
        score = sum(all_values) / len(all_values) if all_values else 0.0
        max_score = sum(all_maxima) / len(all_maxima) if all_maxima else 0.0
    else:
        score, max_score = sum(all_values), sum(all_maxima)

    return _Aggregate(
        score=round(score, 2),
        max_score=round(max_score, 2),
        percentage=_percentage(score, max_score),
        categories=categories,
        items=items,
        raw_score=score,
    )


def _resolve_method(raw: Any, default_method: ScoringMethod) -> ScoringMethod:
    try:
        method = ScoringMethod(raw)
    except ValueError:
        return default_method
    return default_method if method == ScoringMethod.CUSTOM else method


def _scored_questions(category: Mapping) -> List[Dict]:
    questions = [_as_dict(q) for q in _as_list(category.get("questions"))]
    return [q for q in questions if q.get("type") not in NON_SCORED_TYPES]


def _percentage(score: float, max_score: float) -> float:
    return round(score / max_score * 100, 1) if max_score > 0 else 0.0


# ── Score maximal par question ────────────────────────────────────────────────

def get_max_score(question: Mapping, scoring: Optional[Mapping] = None) -> float:
    """
    Score maximal d'une question, par ordre de priorité :
    scale_descriptors → matrix_config.scale → options → scoring.scale.
    0 si aucune échelle n'est trouvée (structure incomplète).
    """
    descriptors = [_to_number(_as_dict(d).get("value")) for d in _as_list(question.get("scale_descriptors"))]
    descriptors = [v for v in descriptors if v is not None]
    if descriptors:
        return max(descriptors)

    matrix_max = _to_number(_as_dict(_as_dict(question.get("matrix_config")).get("scale")).get("max"))
    if matrix_max is not None:
        return matrix_max

    options = [_to_number(_as_dict(o).get("value")) for o in _as_list(question.get("options"))]
    options = [v for v in options if v is not None]
    if options:
        return max(options)

    global_max = _to_number(_as_dict(_as_dict(scoring).get("scale")).get("max"))
    if global_max is not None:
        return global_max

    return 0.0


# ── Tranches de classification ────────────────────────────────────────────────

def find_range(ranges: List[Mapping], score: float) -> Optional[Dict[str, Any]]:
    """
    Première tranche telle que min ≤ score ≤ max (bornes incluses).
    Les chevauchements ne sont pas vérifiés ici (cf. validation.py).
    """
    for band in ranges:
        low, high = _to_number(band.get("min")), _to_number(band.get("max"))
        if low is None or high is None:
            continue
        if low <= score <= high:
            return {
                "label": str(band.get("label") or ""),
                "description": str(band.get("description") or ""),
            }
    return None


def _bands(scoring: Mapping, legacy_key: Optional[str] = None) -> Optional[List[Dict]]:
    """
    Normalise les tranches au format {min, max, label, description}.
    scoring.ranges prioritaire, sinon l'ancien format (seniority_levels / results).
    None si aucune liste non vide n'est configurée (une liste vide vaut absence).
    """
    ranges = _as_list(scoring.get("ranges"))
    if ranges:
        return [_as_dict(r) for r in ranges]

    if legacy_key == "seniority_levels" and _as_list(scoring.get("seniority_levels")):
        return [
            {
                "min": _as_dict(lvl).get("min_score"),
                "max": _as_dict(lvl).get("max_score"),
                "label": _as_dict(lvl).get("label"),
                "description": _as_dict(lvl).get("description"),
            }
            for lvl in _as_list(scoring.get("seniority_levels"))
        ]

    if legacy_key == "results" and _as_list(scoring.get("results")):
        return [
            {
                "min": _as_dict(_as_dict(res).get("range")).get("min"),
                "max": _as_dict(_as_dict(res).get("range")).get("max"),
                "label": _as_dict(res).get("label"),
                "description": _as_dict(res).get("description"),
            }
            for res in _as_list(scoring.get("results"))
        ]

    return None


# ── Helpers de lecture JSON tolérante ─────────────────────────────────────────

def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    return number if math.isfinite(number) else None


def _as_dict(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


_HANDLERS: Dict[str, Callable[[str, Mapping[str, Any], Mapping], ScoringResult]] = {
    TestType.DISC.value:             _calculate_disc,
    TestType.SENIORITY_SELLER.value: _calculate_seniority,
    TestType.SENIORITY_LEADER.value: _calculate_seniority,
    TestType.LEADERSHIP_STYLE.value: _calculate_leadership,
    TestType.DEF_METHOD.value:       _calculate_def_method,
    TestType.VALUES_8D.value:        _calculate_values_8d,
}
