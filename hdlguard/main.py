"""
HDLGuard FastAPI Application.

Lexical Verilog/VHDL design-risk analyzer plus timing and CDC advisors:
  POST /analyze       → rule-based issue detection
  POST /timing        → timing violation guidance
  POST /cdc           → clock-domain-crossing guidance
  GET  /tools         → tool descriptors for LLM function calling
  POST /tools/{name}  → invoke a tool by name
  GET  /health        → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hdlguard.api.routes.analyze import router as analyze_router
from hdlguard.api.routes.guidance import router as guidance_router
from hdlguard.api.routes.health import VERSION, router as health_router
from hdlguard.api.routes.tools import router as tools_router
from hdlguard.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("hdlguard")

app = FastAPI(
    title="HDLGuard",
    description="Rule-based Verilog/VHDL design risk analyzer",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)
app.include_router(guidance_router)
app.include_router(tools_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8', errors='replace')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )
