# modules/assessment/service.py
"""
Orchestration du calcul des évaluations.

Responsabilités :
1. Bloquer les réponses matricielles invalides (valeurs répétées / hors échelle)
2. Déléguer le calcul à engine/scoring/calculator.py
3. Horodater le résultat et l'enrichir (profil DISC)

La persistance du résultat reste à la charge de l'appelant.
"""
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Dict, Optional

from app.content.disc_profiles import get_disc_profile
from app.engine.scoring.calculator import DiscResult, calculate_result
from app.engine.scoring.validation import validate_matrix_answers
from app.shared.enums import TestType

logger = logging.getLogger(__name__)


class AssessmentService:

    def calculate(self, test_type: TestType, answers: Dict, config: Dict) -> Dict:
        """Calcul sans effet de bord. computable=False tant qu'aucune réponse n'est exploitable."""
        result = calculate_result(test_type, answers, config)
        return {
            "test_type": test_type,
            "computable": result is not None,
            "result": asdict(result) if result is not None else None,
        }

    def submit_and_score(self, test_type: TestType, answers: Dict, config: Dict) -> Dict:
        """
        Pipeline de soumission :
        1. Validation des matrices à valeurs uniques
        2. Calcul pur (engine)
        3. Horodatage + profil DISC
        """
        test_type = TestType(test_type)
        if not answers:
            raise ValueError("Aucune réponse fournie.")

        issues = validate_matrix_answers(answers, config)
        if issues:
            raise ValueError(issues[0].message)

        result = calculate_result(test_type, answers, config)
        if result is None:
            logger.error("Résultat non calculable pour un test %s", test_type.value)
            raise ValueError("Impossible de calculer le résultat du test.")

        completed_at = datetime.now(timezone.utc)
        profile_info = None
        if isinstance(result, DiscResult):
            result.completed_at = completed_at
            profile_info = get_disc_profile(result.profile)

        logger.info("Évaluation %s calculée", test_type.value)
        return {
            "test_type": test_type,
            "result": asdict(result),
            "completed_at": completed_at,
            "profile_info": profile_info,
        }

    def get_disc_profile(self, code: str) -> Optional[Dict]:
        return get_disc_profile(code)
