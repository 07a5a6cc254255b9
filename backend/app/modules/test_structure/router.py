# modules/test_structure/router.py
"""
Endpoints de l'éditeur de structures de test.
Validation → Détection du type → Preview du résultat

Règle : ce fichier ne touche jamais l'engine directement.
Tout passe par test_structure_service.
"""
from fastapi import APIRouter

from app.modules.test_structure.service import TestStructureService
from app.modules.test_structure.schemas import (
    TestStructureData,
    PreviewIn,
    PreviewOut,
    ValidationOut,
    DetectTypeOut,
)

router = APIRouter(prefix="/test-structures", tags=["Test Structure"])
service = TestStructureService()


@router.post(
    "/validate",
    response_model=ValidationOut,
    summary="Valider une structure avant enregistrement",
)
def validate_structure(structure: TestStructureData):
    """
    Poids (somme = 100 ± 0.01), tranches (min < max, sans chevauchement),
    matrices (≥ 2 affirmations). Toujours 200 : valid=false + liste d'erreurs.
    """
    return service.validate(structure)


@router.post(
    "/detect-type",
    response_model=DetectTypeOut,
    summary="Déduire le type de test depuis le nom",
)
def detect_type(structure: TestStructureData):
    return {"test_type": service.detect_type(structure)}


@router.post(
    "/preview",
    response_model=PreviewOut,
    summary="Résultat simulé pour un jeu de réponses",
)
def preview(payload: PreviewIn):
    """Type non détecté ou réponses vides → champs à null, jamais d'erreur."""
    return service.preview(payload.structure, payload.answers)
