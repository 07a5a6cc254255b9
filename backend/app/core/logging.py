# app/core/logging.py
"""
Configuration unique du logging applicatif.
Appelé une fois au démarrage par main.py ; les modules utilisent
logging.getLogger(__name__) sans rien configurer eux-mêmes.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
