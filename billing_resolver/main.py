"""FastAPI application exposing the billing snapshot API."""
from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from billing_resolver.app.routes.billing import router as billing_router
from billing_resolver.middleware_perf import RequestTimingMiddleware

load_dotenv()

app = FastAPI(title="Billing Resolver API")

# Vite proxy origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestTimingMiddleware)

app.include_router(billing_router)
