# engine/scoring/detector.py
"""
Détection heuristique du type de test à partir de metadata.name.

Purement indicatif : sert uniquement au preview de l'éditeur de structures.
Dans le flux réel, test_type est un champ stocké et fait foi.
"""
from typing import Any, Callable, List, Mapping, Optional, Tuple

from app.shared.enums import TestType

# Ordre significatif : la première règle qui matche gagne.
_RULES: List[Tuple[Callable[[str], bool], TestType]] = [
    (lambda n: "disc" in n or "comportamental" in n,        TestType.DISC),
    (lambda n: "senioridade" in n and "vendedor" in n,      TestType.SENIORITY_SELLER),
    (lambda n: "senioridade" in n and "líder" in n,         TestType.SENIORITY_LEADER),
    (lambda n: "def" in n or "whatsapp" in n,               TestType.DEF_METHOD),
    (lambda n: "valores" in n or "8d" in n,                 TestType.VALUES_8D),
    (lambda n: "liderança" in n or "leadership" in n,       TestType.LEADERSHIP_STYLE),
]


def detect_test_type(structure: Optional[Mapping[str, Any]]) -> Optional[TestType]:
    """None si le nom est vide ou ne contient aucun mot-clé connu."""
    metadata = structure.get("metadata") if isinstance(structure, Mapping) else None
    name = metadata.get("name") if isinstance(metadata, Mapping) else None
    if not isinstance(name, str) or not name.strip():
        return None

    name = name.lower()
    for matches, test_type in _RULES:
        if matches(name):
            return test_type
    return None
