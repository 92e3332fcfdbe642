import logging

from fastapi import FastAPI
from tripmate.core.config import settings
from tripmate.api.routes import auth, users, groups, group_members, best_dates, me

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Tripmate API", version="0.1.0")

app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(groups.router, prefix="/api/v1")
app.include_router(group_members.router, prefix="/api/v1")
app.include_router(best_dates.router, prefix="/api/v1")
app.include_router(me.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
