# app/modules/assessment/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from datetime import datetime

from app.shared.enums import TestType
from app.modules.test_structure.schemas import (
    TestStructureData,
    AnswerValue,
    ScoringResultOut,
)


# ── Calcul / Soumission ────────────────────────────────────

class CalculateIn(BaseModel):
    """test_type fait foi : jamais déduit du nom de la structure ici."""
    test_type: TestType
    structure: TestStructureData
    answers: Dict[str, AnswerValue] = {}


class SubmitAssessmentIn(BaseModel):
    test_type: TestType
    structure: TestStructureData
    answers: Dict[str, AnswerValue] = Field(..., min_length=1)


class CalculationOut(BaseModel):
    test_type: TestType
    computable: bool
    result: Optional[ScoringResultOut] = None


# ── Profils DISC ───────────────────────────────────────────

class DiscProfileOut(BaseModel):
    code: str
    name: str
    description: str
    strengths: List[str] = []
    development_areas: List[str] = []
    ideal_roles: List[str] = []


class AssessmentResultOut(BaseModel):
    test_type: TestType
    result: ScoringResultOut
    completed_at: datetime
    profile_info: Optional[DiscProfileOut] = None   # DISC uniquement
