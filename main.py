from fastapi import FastAPI

from config import configure_logging
from routes import budget_progress

app = FastAPI(title="Daily Budget Progress")


@app.on_event("startup")
def startup():
    configure_logging()


app.include_router(budget_progress.router)


@app.get("/health")
def health():
    return {"status": "ok"}
