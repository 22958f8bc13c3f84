# src/campsite_explorer/api/main_api.py

from fastapi import FastAPI

from campsite_explorer.api.routes import router

app = FastAPI(
    title="Campsite Explorer API",
    version="1.0.0",
    description="API de clusterização de campings por zoom e viewport",
)

app.include_router(router, prefix="/campsites")
