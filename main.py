# main.py
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from api_graphql import build_graphql_router
from services.store import EntityStore

# -----------------------------
# Env
# -----------------------------
load_dotenv()

HOST = (os.getenv("HOST") or "localhost").strip()
PORT = int(os.getenv("PORT") or 4000)

def base_url() -> str:
    return f"{HOST}:{PORT}/graphql"

# -----------------------------
# FastAPI setup
# -----------------------------
@asynccontextmanager
async def _lifespan(app: FastAPI):
    print(f"API server at {base_url()}")
    yield

def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    """
    Build the API around one store. A fresh seeded store is used unless one is
    passed in (tests hand in their own).
    """
    store = store if store is not None else EntityStore.seeded()

    app = FastAPI(title="Vehicles GraphQL API", lifespan=_lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],   # tighten for prod
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # /graphql  (POST queries/mutations, GET serves GraphiQL)
    app.include_router(build_graphql_router(store), prefix="/graphql")

    @app.get("/health")
    def health():
        return {"ok": True, "service": "vehicles-graphql", "routes": ["/graphql"]}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
