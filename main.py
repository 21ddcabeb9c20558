from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import init_db
from diagnosis.routes import router as diagnosis_router, validation_error_handler

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logging.info("App starting with DATABASE_URL")

app = FastAPI(title="Dance Diagnosis API")

CORS_ORIGINS = [o.strip() for o in os.getenv("DIAGNOSIS_CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if os.getenv("DIAGNOSIS_CREATE_TABLES", "1") == "1":
    init_db()

app.add_exception_handler(RequestValidationError, validation_error_handler)
app.include_router(diagnosis_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
