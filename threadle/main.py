"""Main FastAPI application for the Threadle puzzle service."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .config import settings
from .database import CacheStore, DailyPuzzleCache, RedisCacheStore
from .models import GameState, GuessResponse, PuzzleResponse, RevealResponse
from .pipeline import (
    InvalidAttemptsError,
    PuzzleBuilder,
    RevealService,
    apply_guess,
    feedback_for,
)
from .sources import ContentProvider, RedditContentProvider

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = structlog.get_logger(__name__)

# Global components
cache_store: Optional[CacheStore] = None
content_provider: Optional[ContentProvider] = None
daily_cache: Optional[DailyPuzzleCache] = None
reveal_service = RevealService()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger.info("Starting Threadle...")

    global cache_store, content_provider, daily_cache

    try:
        cache_store = RedisCacheStore()

        if settings.reddit_configured:
            content_provider = RedditContentProvider(settings)
        else:
            logger.warning("Reddit credentials not configured, every puzzle will be the fallback puzzle")

        daily_cache = DailyPuzzleCache(
            store=cache_store,
            builder=PuzzleBuilder(provider=content_provider),
        )

        logger.info("Threadle started successfully")

        yield

    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        raise

    finally:
        logger.info("Shutting down Threadle...")

        if content_provider:
            await content_provider.close()
        if cache_store:
            await cache_store.close()

        logger.info("Threadle shut down")


app = FastAPI(
    title="Threadle",
    description="Daily puzzle: guess the thread from its redacted comments",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependency injection
def get_daily_cache() -> DailyPuzzleCache:
    """Get daily puzzle cache dependency."""
    if daily_cache is None:
        raise HTTPException(status_code=503, detail="Puzzle cache not available")
    return daily_cache


def get_cache_store() -> CacheStore:
    """Get cache store dependency."""
    if cache_store is None:
        raise HTTPException(status_code=503, detail="Cache store not available")
    return cache_store


def get_reveal_service() -> RevealService:
    return reveal_service


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the request body as a JSON object, rejecting anything else with a 400."""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")

    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return payload


# Health check endpoints
@app.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "Threadle"}


@app.get("/health/detailed")
async def detailed_health_check(cache: CacheStore = Depends(get_cache_store)):
    """Detailed health check with component status."""
    health_status = {
        "service": "Threadle",
        "status": "healthy",
        "components": {
            "cache": await cache.health_check(),
            "content_provider": content_provider is not None,
        },
        "statistics": {
            "puzzle_builds": dict(daily_cache.builder.stats) if daily_cache else None,
        },
    }

    # The service stays playable without the cache, so only the cache decides degraded
    cache_healthy = health_status["components"]["cache"]
    health_status["status"] = "healthy" if cache_healthy else "degraded"

    return JSONResponse(content=health_status, status_code=200 if cache_healthy else 503)


# Puzzle endpoints
@app.get("/api/puzzle", response_model=PuzzleResponse)
async def get_puzzle(puzzles: DailyPuzzleCache = Depends(get_daily_cache)):
    """Get today's puzzle in its fully masked form."""
    try:
        puzzle = await puzzles.get_today()
        return puzzle.to_response()

    except Exception as e:
        logger.error("API puzzle error", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch puzzle data.")


@app.post("/api/reveal", response_model=RevealResponse)
async def reveal_comments(
    request: Request,
    puzzles: DailyPuzzleCache = Depends(get_daily_cache),
    reveals: RevealService = Depends(get_reveal_service),
):
    """Reveal today's comments for the player's attempt count."""
    payload = await read_json_object(request)

    try:
        attempts = reveals.validate_attempts(payload.get("attempts"))
    except InvalidAttemptsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        puzzle = await puzzles.get_today()
        return RevealResponse(comments=reveals.reveal_comments(puzzle, attempts))

    except Exception as e:
        logger.error("API reveal error", attempts=attempts, error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to reveal comments.")


@app.post("/api/guess", response_model=GuessResponse)
async def submit_guess(
    request: Request,
    puzzles: DailyPuzzleCache = Depends(get_daily_cache),
    reveals: RevealService = Depends(get_reveal_service),
):
    """Check a guess and return the player's next state with the comments to show."""
    payload = await read_json_object(request)

    guess = payload.get("guess")
    if not isinstance(guess, str):
        raise HTTPException(status_code=400, detail="Guess must be a string")

    game_won = payload.get("gameWon", False)
    if not isinstance(game_won, bool):
        raise HTTPException(status_code=400, detail="gameWon must be a boolean")

    try:
        attempts = reveals.validate_attempts(payload.get("attempts"), allow_fraction=False)
    except InvalidAttemptsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        puzzle = await puzzles.get_today()

        state = GameState(attempts=attempts, game_won=game_won, max_attempts=reveals.max_attempts)
        next_state = apply_guess(state, guess, puzzle.correct_url)

        if next_state.game_over:
            comments = puzzle.original_comments
        else:
            comments = reveals.reveal_comments(puzzle, next_state.attempts)

        return GuessResponse(
            correct=next_state.game_won and not state.game_won,
            attempts=next_state.attempts,
            gameWon=next_state.game_won,
            gameOver=next_state.game_over,
            feedback=feedback_for(next_state, puzzle.correct_url),
            comments=comments,
        )

    except Exception as e:
        logger.error("API guess error", attempts=attempts, error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to check guess.")


# Error handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Handle HTTP exceptions."""
    logger.warning(f"HTTP exception: {exc.status_code} - {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Handle request validation errors."""
    logger.warning(f"Request validation failed: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid request"})


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "threadle.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
