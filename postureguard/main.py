from fastapi import FastAPI
from postureguard.routes.analyze_route import router as analyze_router
from postureguard.routes.health_route import router as health_router
from postureguard.routes.modes_route import router as modes_router

app = FastAPI(
    title="PostureGuard",
    version="1.0.0"
)

app.include_router(health_router, tags=["health"])
app.include_router(modes_router, tags=["modes"])
app.include_router(analyze_router, tags=["analysis"])
