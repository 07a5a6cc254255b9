# modules/test_structure/service.py
"""
Outils d'édition des structures de test (back-office).

Responsabilités :
1. Valider une structure avant sauvegarde (poids, tranches, matrices)
2. Déduire le type de test depuis le nom
3. Prévisualiser le résultat d'un jeu de réponses fictif

Aucune persistance : la structure voyage dans la requête.
"""
import logging
from dataclasses import asdict
from typing import Dict, Optional

from app.engine.scoring.calculator import calculate_result
from app.engine.scoring.detector import detect_test_type
from app.engine.scoring.validation import validate_structure, issues_as_dicts
from app.modules.test_structure.schemas import TestStructureData
from app.shared.enums import TestType

logger = logging.getLogger(__name__)


class TestStructureService:
    __test__ = False

    def validate(self, structure: TestStructureData) -> Dict:
        issues = validate_structure(structure.to_config())
        if issues:
            logger.info(
                "Structure '%s' invalide : %d erreur(s)",
                structure.metadata.name, len(issues),
            )
        return {"valid": not issues, "errors": issues_as_dicts(issues)}

    def detect_type(self, structure: TestStructureData) -> Optional[TestType]:
        return detect_test_type(structure.to_config())

    def preview(self, structure: TestStructureData, answers: Dict) -> Dict:
        """
        Détection + calcul. Les deux peuvent échouer sans erreur :
        nom non reconnu → test_type None, réponses vides → result None.
        """
        config = structure.to_config()
        test_type = detect_test_type(config)
        if test_type is None:
            logger.debug("Preview : type non détecté pour '%s'", structure.metadata.name)
            return {"test_type": None, "result": None}

        result = calculate_result(test_type, answers, config)
        return {
            "test_type": test_type,
            "result": asdict(result) if result is not None else None,
        }
