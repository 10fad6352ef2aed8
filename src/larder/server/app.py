"""ASGI application for Larder."""
# mypy: ignore-errors

from __future__ import annotations

import logging
from datetime import date
from time import perf_counter
from typing import Any, Optional
from uuid import uuid4

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field, ValidationError

from larder import __version__, metrics
from larder.config import Settings, get_settings
from larder.logging_utils import configure_logging as configure_app_logging
from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.plan import Compatibility, MealPlan
from larder.models.recipe import Nutrition, Recipe, RecipeIngredient
from larder.models.shopping import ShoppingItem, ShoppingProgress
from larder.planner.freshness import EXPIRING_WITHIN_DAYS, expired_items, expiring_items
from larder.planner.scoring import recipe_compatibility
from larder.planner.shopping import group_by_category, shopping_progress
from larder.planner.utils import plans_for_dates, week_dates
from larder.search import filter_inventory, recipe_tags, search_recipes
from larder.server import deps

logger = logging.getLogger(__name__)

MAX_WEEK_OFFSET = 52


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def _normalize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{key: _json_safe(value) for key, value in error.items()} for error in errors]


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def _not_found(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _require_changes(payload: BaseModel) -> dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields provided for update",
        )
    return changes


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Larder Meal Planner", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("larder.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details without leaking sensitive data."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                duration_ms / 1000.0
            )
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log_kwargs: dict[str, Any] = {}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            log_kwargs["extra"] = {"request_id": request_id}

        logger.warning(
            "Validation error on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
            **log_kwargs,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": _normalize_validation_errors(exc.errors())},
        )

    @application.get(
        "/inventory",
        response_model=list[Ingredient],
        summary="List current inventory",
    )
    def inventory_list(
        q: str = Query(default="", max_length=255),
        category: Optional[IngredientCategory] = Query(default=None),
        provider: deps.InventoryProvider = Depends(deps.get_inventory_provider),
    ) -> list[Ingredient]:
        return filter_inventory(provider(), q, category=category)

    @application.get(
        "/inventory/expiring",
        response_model=list[Ingredient],
        summary="List inventory expiring soon",
    )
    def inventory_expiring(
        days: int = Query(default=EXPIRING_WITHIN_DAYS, ge=0, le=365),
        provider: deps.InventoryProvider = Depends(deps.get_inventory_provider),
        today: deps.TodayProvider = Depends(deps.get_today_provider),
    ) -> list[Ingredient]:
        return expiring_items(provider(), today(), within_days=days)

    @application.get(
        "/inventory/expired",
        response_model=list[Ingredient],
        summary="List inventory past its expiry date",
    )
    def inventory_expired(
        provider: deps.InventoryProvider = Depends(deps.get_inventory_provider),
        today: deps.TodayProvider = Depends(deps.get_today_provider),
    ) -> list[Ingredient]:
        return expired_items(provider(), today())

    @application.post(
        "/inventory",
        response_model=Ingredient,
        status_code=status.HTTP_201_CREATED,
        summary="Create inventory item",
    )
    def inventory_create(
        payload: dict[str, Any] = Body(...),
        auth: None = Depends(deps.require_api_token),
        creator: deps.InventoryCreator = Depends(deps.get_inventory_creator),
    ) -> Ingredient:
        try:
            parsed = InventoryCreateRequest.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Invalid inventory create payload=%s errors=%s", payload, exc.errors())
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=_normalize_validation_errors(exc.errors()),
            ) from exc

        create_payload = parsed.model_dump()
        logger.debug("Creating inventory item payload=%s", create_payload)
        return creator(create_payload)

    @application.put(
        "/inventory/{item_id}",
        response_model=Ingredient,
        summary="Update inventory item",
    )
    def inventory_update(
        item_id: str,
        payload: InventoryUpdateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        updater: deps.InventoryUpdater = Depends(deps.get_inventory_updater),
    ) -> Ingredient:
        update_payload = _require_changes(payload)
        logger.debug("Updating inventory item %s with payload=%s", item_id, update_payload)
        try:
            return updater(item_id, update_payload)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.delete(
        "/inventory/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete inventory item",
    )
    def inventory_delete(
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.InventoryDeleter = Depends(deps.get_inventory_deleter),
    ) -> None:
        try:
            deleter(item_id)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.get(
        "/recipes",
        response_model=list[Recipe],
        summary="List or search recipes",
    )
    def recipes_list(
        q: str = Query(default="", max_length=255),
        tag: Optional[str] = Query(default=None, min_length=1, max_length=64),
        provider: deps.RecipeProvider = Depends(deps.get_recipe_provider),
    ) -> list[Recipe]:
        return search_recipes(provider(), q, tag=tag)

    @application.post(
        "/recipes",
        response_model=Recipe,
        status_code=status.HTTP_201_CREATED,
        summary="Create a user recipe",
    )
    def recipes_create(
        payload: RecipeCreateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        creator: deps.RecipeCreator = Depends(deps.get_recipe_creator),
    ) -> Recipe:
        recipe = creator(payload.model_dump())
        logger.info("Recipe created id=%s name=%s", recipe.id, recipe.name)
        return recipe

    @application.get(
        "/recipes/tags",
        response_model=list[str],
        summary="List the tags used across the catalog",
    )
    def recipes_tags(
        provider: deps.RecipeProvider = Depends(deps.get_recipe_provider),
    ) -> list[str]:
        return recipe_tags(provider())

    @application.get(
        "/recipes/{recipe_id}",
        response_model=Recipe,
        summary="Fetch a recipe",
    )
    def recipes_get(
        recipe_id: str,
        fetcher: deps.RecipeFetcher = Depends(deps.get_recipe_fetcher),
    ) -> Recipe:
        recipe = fetcher(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    @application.get(
        "/recipes/{recipe_id}/compatibility",
        response_model=Compatibility,
        summary="Check how much of a recipe the inventory covers",
    )
    def recipes_compatibility(
        recipe_id: str,
        fetcher: deps.RecipeFetcher = Depends(deps.get_recipe_fetcher),
        inventory_provider: deps.InventoryProvider = Depends(deps.get_inventory_provider),
    ) -> Compatibility:
        recipe = fetcher(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe_compatibility(recipe, inventory_provider())

    @application.put(
        "/recipes/{recipe_id}",
        response_model=Recipe,
        summary="Update a recipe",
    )
    def recipes_update(
        recipe_id: str,
        payload: RecipeUpdateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        updater: deps.RecipeUpdater = Depends(deps.get_recipe_updater),
    ) -> Recipe:
        update_payload = _require_changes(payload)
        try:
            return updater(recipe_id, update_payload)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.delete(
        "/recipes/{recipe_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a recipe",
    )
    def recipes_delete(
        recipe_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.RecipeDeleter = Depends(deps.get_recipe_deleter),
    ) -> None:
        try:
            deleter(recipe_id)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.get(
        "/meal-plans",
        response_model=list[MealPlan],
        summary="List planned meals",
    )
    def meal_plans_list(
        week_offset: Optional[int] = Query(default=None, ge=-MAX_WEEK_OFFSET, le=MAX_WEEK_OFFSET),
        provider: deps.MealPlanProvider = Depends(deps.get_meal_plan_provider),
        today: deps.TodayProvider = Depends(deps.get_today_provider),
    ) -> list[MealPlan]:
        plans = provider()
        if week_offset is None:
            return plans
        return plans_for_dates(plans, week_dates(week_offset, today()))

    @application.post(
        "/meal-plans/generate",
        response_model=list[MealPlan],
        summary="Generate the weekday dinner plan",
    )
    def meal_plans_generate(
        week_offset: int = Query(default=0, ge=-MAX_WEEK_OFFSET, le=MAX_WEEK_OFFSET),
        auth: None = Depends(deps.require_api_token),
        planner: deps.WeekPlanner = Depends(deps.get_week_planner),
        today: deps.TodayProvider = Depends(deps.get_today_provider),
    ) -> list[MealPlan]:
        return planner(week_offset, today())

    @application.delete(
        "/meal-plans/{plan_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a planned meal",
    )
    def meal_plans_delete(
        plan_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.MealPlanDeleter = Depends(deps.get_meal_plan_deleter),
    ) -> None:
        try:
            deleter(plan_id)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.get(
        "/shopping-list",
        response_model=list[ShoppingItem],
        summary="List shopping list items",
    )
    def shopping_list_list(
        provider: deps.ShoppingListProvider = Depends(deps.get_shopping_list_provider),
    ) -> list[ShoppingItem]:
        return provider()

    @application.get(
        "/shopping-list/progress",
        response_model=ShoppingProgress,
        summary="Summarise checked-off shopping items",
    )
    def shopping_list_progress(
        provider: deps.ShoppingListProvider = Depends(deps.get_shopping_list_provider),
    ) -> ShoppingProgress:
        return shopping_progress(provider())

    @application.get(
        "/shopping-list/grouped",
        response_model=dict[str, list[ShoppingItem]],
        summary="List shopping items grouped by store category",
    )
    def shopping_list_grouped(
        provider: deps.ShoppingListProvider = Depends(deps.get_shopping_list_provider),
    ) -> dict[str, list[ShoppingItem]]:
        grouped = group_by_category(provider())
        return {category.value: items for category, items in grouped.items()}

    @application.post(
        "/shopping-list",
        response_model=ShoppingItem,
        status_code=status.HTTP_201_CREATED,
        summary="Create shopping list item",
    )
    def shopping_list_create(
        payload: ShoppingListCreateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        creator: deps.ShoppingListCreator = Depends(deps.get_shopping_list_creator),
    ) -> ShoppingItem:
        return creator(payload.model_dump())

    @application.post(
        "/shopping-list/generate",
        response_model=list[ShoppingItem],
        summary="Regenerate the shopping list from planned meals",
    )
    def shopping_list_generate(
        auth: None = Depends(deps.require_api_token),
        generator: deps.ShoppingListGenerator = Depends(deps.get_shopping_list_generator),
    ) -> list[ShoppingItem]:
        return generator()

    @application.post(
        "/shopping-list/reset",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Reset shopping list",
    )
    def shopping_list_reset(
        auth: None = Depends(deps.require_api_token),
        resetter: deps.ShoppingListResetter = Depends(deps.get_shopping_list_resetter),
    ) -> None:
        resetter()

    @application.put(
        "/shopping-list/{item_id}",
        response_model=ShoppingItem,
        summary="Update shopping list item",
    )
    def shopping_list_update(
        item_id: str,
        payload: ShoppingListUpdateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        updater: deps.ShoppingListUpdater = Depends(deps.get_shopping_list_updater),
    ) -> ShoppingItem:
        update_payload = _require_changes(payload)
        try:
            return updater(item_id, update_payload)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.delete(
        "/shopping-list/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete shopping list item",
    )
    def shopping_list_delete(
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.ShoppingListDeleter = Depends(deps.get_shopping_list_deleter),
    ) -> None:
        try:
            deleter(item_id)
        except ValueError as exc:
            raise _not_found(exc) from exc

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


class InventoryCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    categories: list[IngredientCategory] = Field(min_length=1)
    quantity: float = Field(ge=0)
    unit: str = Field(min_length=1, max_length=64)
    expiry_date: date
    added_date: Optional[date] = None
    tags: Optional[list[str]] = None


class InventoryUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    categories: Optional[list[IngredientCategory]] = Field(default=None, min_length=1)
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=64)
    expiry_date: Optional[date] = None
    tags: Optional[list[str]] = None


class RecipeCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    servings: int = Field(default=1, ge=1)
    nutrition: Nutrition = Field(default_factory=Nutrition)
    tags: list[str] = Field(default_factory=list)
    image: Optional[str] = Field(default=None, max_length=2048)


class RecipeUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    ingredients: Optional[list[RecipeIngredient]] = None
    instructions: Optional[list[str]] = None
    prep_time: Optional[int] = Field(default=None, ge=0)
    cook_time: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=1)
    nutrition: Optional[Nutrition] = None
    tags: Optional[list[str]] = None
    image: Optional[str] = Field(default=None, max_length=2048)


class ShoppingListCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    quantity: float = Field(default=1, ge=0)
    unit: str = Field(default="piece", min_length=1, max_length=64)
    category: IngredientCategory = Field(default=IngredientCategory.PANTRY)


class ShoppingListUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=64)
    category: Optional[IngredientCategory] = None
    completed: Optional[bool] = None


app = create_app()

__all__ = ["app", "create_app"]
