# modules/assessment/router.py
"""
Endpoints du calcul des évaluations.
Calcul (temps réel) → Soumission → Contenu des profils DISC

Règle : ce fichier ne touche jamais l'engine.
Tout passe par assessment_service.
"""
from fastapi import APIRouter, HTTPException, status

from app.modules.assessment.service import AssessmentService
from app.modules.assessment.schemas import (
    CalculateIn,
    SubmitAssessmentIn,
    CalculationOut,
    AssessmentResultOut,
    DiscProfileOut,
)

router = APIRouter(prefix="/assessments", tags=["Assessment"])
service = AssessmentService()


# ─────────────────────────────────────────────
# CALCUL
# ─────────────────────────────────────────────

@router.post(
    "/calculate",
    response_model=CalculationOut,
    summary="Calculer un résultat sans le finaliser",
)
def calculate(payload: CalculateIn):
    """Réponses vides → computable=false, result=null."""
    return service.calculate(
        test_type=payload.test_type,
        answers=payload.answers,
        config=payload.structure.to_config(),
    )


@router.post(
    "/submit",
    response_model=AssessmentResultOut,
    status_code=status.HTTP_201_CREATED,
    summary="Soumettre les réponses d'un test",
)
def submit_assessment(payload: SubmitAssessmentIn):
    """
    Valide les matrices à valeurs uniques puis calcule le résultat final.
    Réponses invalides ou résultat non calculable → 400.
    """
    try:
        return service.submit_and_score(
            test_type=payload.test_type,
            answers=payload.answers,
            config=payload.structure.to_config(),
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ─────────────────────────────────────────────
# PROFILS DISC (lecture)
# ─────────────────────────────────────────────

@router.get(
    "/disc-profiles/{code}",
    response_model=DiscProfileOut,
    summary="Contenu d'un profil DISC",
)
def get_disc_profile(code: str):
    profile = service.get_disc_profile(code)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profil DISC inconnu."
        )
    return profile
