# main.py
"""
Point d'entrée de l'API de scoring des évaluations.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux (router → service) + engine pur transversal.
Aucune persistance ici : structures et évaluations sont stockées ailleurs.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import setup_logging

from app.modules.assessment.router     import router as assessment_router
from app.modules.test_structure.router import router as test_structure_router

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(test_structure_router)
app.include_router(assessment_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": settings.VERSION}
