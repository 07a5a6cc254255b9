# engine/scoring/validation.py
"""
Validation d'une structure de test au moment de l'enregistrement,
et des réponses matricielles au moment de la soumission.

Jamais appelé par calculator.py : le moteur reste pur et tolérant,
c'est l'appelant qui décide de bloquer ou non.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from app.engine.scoring.calculator import _as_dict, _as_list, _to_number
from app.shared.enums import QuestionType, ScoringMethod

WEIGHT_SUM_TARGET = 100.0
WEIGHT_SUM_TOLERANCE = 0.01

WEIGHTED_METHODS = {ScoringMethod.WEIGHTED_SUM.value, ScoringMethod.WEIGHTED_AVERAGE.value}


@dataclass
class ValidationIssue:
    field:   str
    message: str


def validate_category_weights(
    categories: List[Mapping[str, Any]],
    weights: Optional[Mapping[str, Any]],
) -> Optional[str]:
    """Message d'erreur, ou None si les poids sont complets et somment à 100."""
    if not weights:
        return "Poids de catégorie non fournis."

    missing = [
        str(_as_dict(c).get("id"))
        for c in categories
        if str(_as_dict(c).get("id")) not in weights
    ]
    if missing:
        return f"Poids manquants pour les catégories : {', '.join(missing)}"

    total = sum(_to_number(w) or 0.0 for w in weights.values())
    if abs(total - WEIGHT_SUM_TARGET) > WEIGHT_SUM_TOLERANCE:
        return f"La somme des poids doit être 100% (actuelle : {total:.2f}%)"

    return None


def validate_scoring_ranges(ranges: List[Mapping[str, Any]]) -> Optional[str]:
    """
    Vérifie min < max pour chaque tranche et l'absence de chevauchement.
    Deux tranches qui partagent une borne se chevauchent (bornes incluses).
    """
    bounds = []
    for i, band in enumerate(ranges, start=1):
        low, high = _to_number(_as_dict(band).get("min")), _to_number(_as_dict(band).get("max"))
        if low is None or high is None or low >= high:
            return f"Tranche {i} : min doit être inférieur à max"
        bounds.append((low, high))

    for i, (low, high) in enumerate(bounds):
        for j in range(i + 1, len(bounds)):
            other_low, other_high = bounds[j]
            if low <= other_high and other_low <= high:
                return f"Les tranches {i + 1} et {j + 1} se chevauchent"

    return None


def validate_structure(structure: Mapping[str, Any]) -> List[ValidationIssue]:
    """Toutes les erreurs bloquantes d'une structure avant publication."""
    issues: List[ValidationIssue] = []
    categories = _as_list(structure.get("categories"))
    scoring = _as_dict(structure.get("scoring"))

    if not str(_as_dict(structure.get("metadata")).get("name") or "").strip():
        issues.append(ValidationIssue("metadata.name", "Le nom est obligatoire."))

    if not categories:
        issues.append(ValidationIssue("categories", "Au moins une catégorie est obligatoire."))

    if scoring.get("method") in WEIGHTED_METHODS:
        error = validate_category_weights(categories, _as_dict(scoring.get("category_weights")))
        if error:
            issues.append(ValidationIssue("scoring.category_weights", error))

    ranges = _as_list(scoring.get("ranges"))
    if ranges:
        error = validate_scoring_ranges(ranges)
        if error:
            issues.append(ValidationIssue("scoring.ranges", error))

    for category in categories:
        for question in _as_list(_as_dict(category).get("questions")):
            question = _as_dict(question)
            if question.get("type") != QuestionType.MATRIX_RATING.value:
                continue
            statements = _as_list(_as_dict(question.get("matrix_config")).get("statements"))
            if len(statements) < 2:
                issues.append(ValidationIssue(
                    f"questions.{question.get('id')}.matrix_config.statements",
                    "Au moins 2 affirmations sont nécessaires.",
                ))

    return issues


def validate_matrix_answers(
    answers: Mapping[str, Any],
    config: Mapping[str, Any],
) -> List[ValidationIssue]:
    """
    Réponses aux questions matricielles avec validation.unique_values :
    valeurs répétées ou hors échelle. Les questions non répondues sont ignorées.
    """
    issues: List[ValidationIssue] = []

    for category in _as_list(config.get("categories")):
        for question in _as_list(_as_dict(category).get("questions")):
            question = _as_dict(question)
            matrix = _as_dict(question.get("matrix_config"))
            if not _as_dict(matrix.get("validation")).get("unique_values"):
                continue

            ranks = answers.get(str(question.get("id")))
            if not isinstance(ranks, Mapping):
                continue

            field_name = f"answers.{question.get('id')}"
            values = [_to_number(v) for v in ranks.values()]
            if any(v is None for v in values):
                issues.append(ValidationIssue(field_name, "Valeur non numérique."))
                continue

            if len(set(values)) != len(values):
                issues.append(ValidationIssue(field_name, "Chaque valeur ne peut être utilisée qu'une fois."))

            scale = _as_dict(matrix.get("scale"))
            low, high = _to_number(scale.get("min")), _to_number(scale.get("max"))
            if low is not None and high is not None and any(v < low or v > high for v in values):
                issues.append(ValidationIssue(field_name, f"Valeurs attendues entre {low:g} et {high:g}."))

    return issues


def issues_as_dicts(issues: List[ValidationIssue]) -> List[Dict[str, str]]:
    return [{"field": i.field, "message": i.message} for i in issues]
