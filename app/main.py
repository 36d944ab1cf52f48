import logging

from fastapi import FastAPI

from app.routers import summary

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="Health Summary",
    description="AI health summaries from migrant patients' medical records",
    version="0.1.0",
)

app.include_router(summary.router)
