from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from selfsnap.config import configure_logging, settings
from selfsnap.api.routes import session, collages, frames, layout
from selfsnap.templates.index import get_html_template

configure_logging()

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(session.router, prefix="/api")
app.include_router(collages.router, prefix="/api")
app.include_router(frames.router, prefix="/api")
app.include_router(layout.router, prefix="/api")

@app.get("/")
async def get_index():
    return HTMLResponse(get_html_template())

@app.get("/health")
async def health_check():
    return {"status": "healthy", "table": settings.ddb_table_name}
