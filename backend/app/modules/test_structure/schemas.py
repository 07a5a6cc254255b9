# app/modules/test_structure/schemas.py
"""
Contrat JSON d'une structure de test (TestStructureData).

Volontairement tolérant : le preview doit fonctionner sur une structure
en cours d'édition. Les règles bloquantes (poids, tranches) sont vérifiées
par engine/scoring/validation.py, pas ici.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictBool
from typing import List, Optional, Dict, Union, Any, Literal, Annotated
from datetime import datetime

from app.shared.enums import QuestionType, ScoringMethod, TestType


# ── Métadonnées ────────────────────────────────────────────

class TestMetadata(BaseModel):
    name: str = ""
    description: str = ""
    instructions: Optional[str] = None
    applicable_job_titles: Optional[List[str]] = None
    estimated_duration_minutes: Optional[int] = None
    model_config = ConfigDict(extra="allow")


# ── Questions ──────────────────────────────────────────────

class QuestionOption(BaseModel):
    id: str
    label: str = ""
    value: Union[float, str] = 0
    order: int = 0
    description: Optional[str] = None


class ScaleDescriptor(BaseModel):
    value: float
    label: str = ""
    description: Optional[str] = None


class MatrixStatement(BaseModel):
    id: str
    label: Optional[str] = None           # Jamais affiché (biais), sert au classement
    text: str = ""
    order: int = 0
    metadata: Optional[Dict[str, Any]] = None   # {profile: "D", scoring_key: ...}


class MatrixScale(BaseModel):
    min: float
    max: float
    descriptors: Optional[List[ScaleDescriptor]] = None


class MatrixValidation(BaseModel):
    unique_values: bool = False


class MatrixRatingConfig(BaseModel):
    statements: List[MatrixStatement] = []
    scale: MatrixScale
    validation: Optional[MatrixValidation] = None


class Question(BaseModel):
    id: str
    text: str = ""
    type: QuestionType
    order: int = 0
    required: bool = False
    options: Optional[List[QuestionOption]] = None
    scale_descriptors: Optional[List[ScaleDescriptor]] = None
    matrix_config: Optional[MatrixRatingConfig] = None
    validation: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


class Category(BaseModel):
    id: str
    name: str = ""
    description: Optional[str] = None
    order: int = 0
    questions: List[Question] = []
    weight: Optional[float] = Field(None, ge=0, le=100)


# ── Scoring ────────────────────────────────────────────────

class ScaleLabels(BaseModel):
    min: Optional[str] = None
    max: Optional[str] = None
    middle: Optional[str] = None


class ScaleConfig(BaseModel):
    min: float
    max: float
    step: Optional[float] = None
    labels: Optional[ScaleLabels] = None


class ScoringRange(BaseModel):
    id: str = ""
    label: str
    min: float
    max: float
    description: Optional[str] = None
    color: Optional[str] = None


class SeniorityLevel(BaseModel):
    label: str
    min_score: float
    max_score: float
    description: Optional[str] = None


class ResultRange(BaseModel):
    min: float
    max: float


class ResultMapping(BaseModel):
    range: ResultRange
    label: str
    description: str = ""
    recommendations: Optional[List[str]] = None


class ScoringConfig(BaseModel):
    method: ScoringMethod = ScoringMethod.SUM
    category_weights: Optional[Dict[str, float]] = None
    scale: Optional[ScaleConfig] = None
    ranges: Optional[List[ScoringRange]] = None
    seniority_levels: Optional[List[SeniorityLevel]] = None
    results: Optional[List[ResultMapping]] = None


class TestStructureData(BaseModel):
    metadata: TestMetadata = Field(default_factory=TestMetadata)
    categories: List[Category] = []
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    def to_config(self) -> Dict[str, Any]:
        """Dict JSON passé à l'engine (qui ne connaît pas pydantic)."""
        return self.model_dump(mode="json", exclude_none=True)


# ── Requêtes / réponses ────────────────────────────────────

# StrictBool en tête : un booléen reste booléen (sinon true → 1.0) et le calcul l'ignore
RankValue = Union[StrictBool, float]
AnswerValue = Union[StrictBool, float, Dict[str, RankValue], str]      # str : questions texte, ignorées au calcul


class PreviewIn(BaseModel):
    structure: TestStructureData
    answers: Dict[str, AnswerValue] = {}


class ValidationIssueOut(BaseModel):
    field: str
    message: str


class ValidationOut(BaseModel):
    valid: bool
    errors: List[ValidationIssueOut] = []


class DetectTypeOut(BaseModel):
    test_type: Optional[TestType] = None


# ── Résultat (variante par type de test) ───────────────────

class ScoredItemOut(BaseModel):
    id: str
    name: str
    score: float
    max_score: float
    category: Optional[str] = None


class CategoryScoreOut(BaseModel):
    id: str
    name: str
    score: float
    max_score: float
    percentage: float
    weight: Optional[float] = None
    items: List[ScoredItemOut] = []


class DiscResultOut(BaseModel):
    test_type: Literal["disc"]
    scores: Dict[str, float]              # {D, I, S, C}
    profile: str                          # ex: "DI"
    items: List[ScoredItemOut] = []
    completed_at: Optional[datetime] = None


class SeniorityResultOut(BaseModel):
    test_type: Literal["seniority_seller", "seniority_leader"]
    score: float
    max_score: float
    percentage: float
    level: str                            # "Júnior" | "Pleno" | "Sênior" | tranche configurée
    description: str = ""
    categories: List[CategoryScoreOut] = []
    items: List[ScoredItemOut] = []


class LeadershipStyleResultOut(BaseModel):
    test_type: Literal["leadership_style"]
    score: float
    max_score: float
    percentage: float
    style: str
    description: str = ""


class DefMethodResultOut(BaseModel):
    test_type: Literal["def_method"]
    global_score: float
    global_max: float
    global_percentage: float
    level: Optional[str] = None
    categories: List[CategoryScoreOut] = []


class Values8DResultOut(BaseModel):
    test_type: Literal["values_8d"]
    dimensions: Dict[str, float]
    items: List[ScoredItemOut] = []


ScoringResultOut = Annotated[
    Union[
        DiscResultOut,
        SeniorityResultOut,
        LeadershipStyleResultOut,
        DefMethodResultOut,
        Values8DResultOut,
    ],
    Field(discriminator="test_type"),
]


class PreviewOut(BaseModel):
    test_type: Optional[TestType] = None
    result: Optional[ScoringResultOut] = None
