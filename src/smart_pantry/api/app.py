"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from smart_pantry.api.models import RecipeRequest
from smart_pantry.app_logging import configure_logging
from smart_pantry.containers import AppContainer
from smart_pantry.domain.generation import GenerationError
from smart_pantry.domain.recipes import recipe_to_row
from smart_pantry.services.generation import RecipeStoreError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def cors(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Answer pre-flight requests and allow every origin."""
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/generate-recipe")
    async def generate_recipe(payload: RecipeRequest, request: Request) -> Response:
        """Generate one recipe from the caller's selections and save it."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.generation_service.generate(
                ingredients=payload.ingredients,
                dietary_preferences=payload.dietary_preferences,
                cuisine_types=payload.cuisine_types,
                user_id=payload.user_id,
            )
        except Exception:
            logger.exception(
                "Error in generate-recipe handler",
                extra={"user_id": str(payload.user_id)},
            )
            return _error_response("Failed to generate recipe")
        if isinstance(result, GenerationError):
            logger.error(
                "Recipe generation failed",
                extra={"kind": result.kind.value, "user_id": str(payload.user_id)},
            )
            return _error_response(result.message)
        return JSONResponse(recipe_to_row(result))

    @app.get("/recipes")
    async def list_recipes(
        user_id: UUID, request: Request, limit: int = 20
    ) -> Response:
        """Return a user's saved recipes, newest first."""
        state_container: AppContainer = request.app.state.container
        try:
            recipes = state_container.recipe_book_service.list_recipes(user_id, limit)
        except RecipeStoreError:
            logger.exception("Failed to list recipes", extra={"user_id": str(user_id)})
            return _error_response("Failed to load recipes")
        return JSONResponse({"recipes": [recipe_to_row(recipe) for recipe in recipes]})

    @app.get("/recipes/{recipe_id}")
    async def recipe_detail(recipe_id: UUID, request: Request) -> Response:
        """Return one saved recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            recipe = state_container.recipe_book_service.get_recipe(recipe_id)
        except RecipeStoreError:
            logger.exception(
                "Failed to load recipe", extra={"recipe_id": str(recipe_id)}
            )
            return _error_response("Failed to load recipe")
        if recipe is None:
            return JSONResponse(
                {"error": "Recipe not found"}, status_code=status.HTTP_404_NOT_FOUND
            )
        return JSONResponse(recipe_to_row(recipe))

    return app


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": message}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
