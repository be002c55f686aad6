import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ucca import config
from ucca.api.routes import router

logging.basicConfig(
    level=config.UCCA_LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="UCCA Identification",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.UCCA_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
