import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reasoner.api.reasoning_routes import router as reasoning_router
from reasoner.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

# Set DEBUG level for our app modules
logging.getLogger("reasoner").setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)
settings = get_settings()

app = FastAPI(
    title="Reasoning Agent API",
    description="Iterative model-backed reasoning that ends in a structured artifact",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reasoning_router, prefix="/api/v1/reasoning", tags=["reasoning"])


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Reasoning Agent API")
    logger.info(f"LLM Base URL: {settings.llm_base_url}")
    logger.info(f"Models - Reasoning: {settings.model_reasoning}, Reflection: {settings.model_reflection}, "
                f"Synthesis: {settings.model_synthesis}")
    logger.info(f"Max iterations: {settings.reasoning_max_iterations}, fail fast: {settings.reasoning_fail_fast}")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "models": {
            "reasoning": settings.model_reasoning,
            "reflection": settings.model_reflection,
            "synthesis": settings.model_synthesis
        }
    }
