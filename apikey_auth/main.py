import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apikey_auth.middleware.auth import APIKeyAuthMiddleware
from apikey_auth.routers.auth import router as auth_router

app = FastAPI(title="API Key Auth", version="0.1.0")

# --- Security: Authorization: ApiKey <key> on /api/* (see services/auth_settings.py) ---
app.add_middleware(APIKeyAuthMiddleware)

# CORS: load origins from env (comma-separated), default to localhost dev server
_cors_env = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
cors_origins = [o.strip() for o in _cors_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Security: HSTS and security headers ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(auth_router)


@app.get("/api/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
