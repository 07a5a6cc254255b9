# app/shared/enums.py
"""
Toutes les énumérations du service de scoring.

Source unique de vérité pour les types de tests, de questions et de calcul.
Importé par les schemas, services et engine.
"""

from enum import Enum


class TestType(str, Enum):
    DISC             = "disc"
    SENIORITY_SELLER = "seniority_seller"
    SENIORITY_LEADER = "seniority_leader"
    LEADERSHIP_STYLE = "leadership_style"
    DEF_METHOD       = "def_method"
    VALUES_8D        = "values_8d"

    __test__ = False   # pas une classe de test pour pytest


class QuestionType(str, Enum):
    SINGLE_CHOICE   = "single_choice"     # Radio
    MULTIPLE_CHOICE = "multiple_choice"   # Checkboxes
    SCALE           = "scale"             # Likert (1-5, 1-3…)
    MATRIX_RATING   = "matrix_rating"     # Plusieurs affirmations notées (DISC)
    TEXT            = "text"
    TEXTAREA        = "textarea"
    NUMBER          = "number"


class ScoringMethod(str, Enum):
    SUM              = "sum"
    WEIGHTED_SUM     = "weighted_sum"
    AVERAGE          = "average"
    WEIGHTED_AVERAGE = "weighted_average"
    CUSTOM           = "custom"           # Logique propre au type de test


class DiscDimension(str, Enum):
    """Ordre de déclaration = ordre de départage en cas d'égalité."""
    D = "D"   # Dominância
    I = "I"   # Influência
    S = "S"   # Estabilidade
    C = "C"   # Conformidade
