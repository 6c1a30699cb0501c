# main.py
import os
import logging
from fastapi import FastAPI, Body, Form, HTTPException
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
import utils
import database
import export_service
from discovery import DISCOVER_FEEDS, DISCOVER_LOGIN, DiscoveryService
from discovery.utils import make_client

app = FastAPI()

# CORS origins come from config.json
origins = utils.config.get("cors_origins", [])

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

discovery_config = utils.discovery_config()

# Persistent client shared by every discovery request
client = make_client(discovery_config.user_agent)
service = DiscoveryService(client, discovery_config, sink=database.save_discovery_run)

@app.on_event("startup")
async def startup_event():
    """On startup, configure and initialize the database."""
    db_file = utils.config.get("database_file", "discovery.db")
    database.configure_database(db_file)
    await database.initialize_db()
    logging.info(f"Discovery service ready, results stored in {db_file}")

@app.on_event("shutdown")
async def shutdown_event():
    """On shutdown, close the httpx client."""
    await client.aclose()

def log_summary(kind: str, response: dict) -> dict:
    if response.get("success"):
        summarize = export_service.summarize_feeds if kind == DISCOVER_FEEDS else export_service.summarize_logins
        logging.info(summarize(response["data"]))
    return response

# --- Endpoints ---

@app.post("/discover")
async def discover_endpoint(message: dict = Body(...)):
    """
    RPC envelope: {"type": "discoverFeeds" | "discoverLogin", "url": ..., "html": ...}.
    Always answers with {"success": true, "data": ...} or {"success": false, "error": ...}.
    """
    return log_summary(message.get("type"), await service.handle(message))

@app.post("/discover/feeds")
async def discover_feeds_endpoint(url: str = Form(...), html: str = Form(None)):
    """Discovers sitemaps and RSS/Atom feeds for the given page."""
    return log_summary(DISCOVER_FEEDS, await service.handle({"type": DISCOVER_FEEDS, "url": url, "html": html}))

@app.post("/discover/login")
async def discover_login_endpoint(url: str = Form(...), html: str = Form(None)):
    """Discovers login pages for the given page."""
    return log_summary(DISCOVER_LOGIN, await service.handle({"type": DISCOVER_LOGIN, "url": url, "html": html}))

@app.get("/results")
async def get_results_endpoint(limit: int = 50):
    """Retrieves the most recent discovery runs."""
    runs = await database.get_discovery_runs(limit)
    return {"runs": runs}

@app.get("/results/{run_id}")
async def get_result_endpoint(run_id: str):
    run = await database.get_discovery_run(run_id)
    if not run:
        raise HTTPException(status_code=404, detail="Discovery run not found.")
    return run

@app.delete("/results", status_code=200)
async def clear_results_endpoint():
    """Deletes every stored discovery run."""
    deleted = await database.clear_discovery_runs()
    return {"message": "Data cleared", "deleted": deleted}

@app.get("/export")
async def export_endpoint(url: str):
    """
    Exports the latest feed and login results for a page as a JSON file.
    """
    feeds = await database.get_latest_run(url, DISCOVER_FEEDS)
    logins = await database.get_latest_run(url, DISCOVER_LOGIN)
    try:
        payload = export_service.build_export(
            feeds['result'] if feeds else None,
            logins['result'] if logins else None,
            url,
        )
    except export_service.NothingToExport as e:
        raise HTTPException(status_code=404, detail=str(e))
    path = export_service.write_export(payload, utils.EXPORT_DIRECTORY)
    return FileResponse(path, media_type="application/json", filename=os.path.basename(path))
