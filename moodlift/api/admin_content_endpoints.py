"""
Admin content endpoints - CRUD over books, games, testimonials,
consultants and SEO metadata.

Responses keep the dashboard's shapes (`{"books": [...]}`, `{"book": {...}}`,
`{"success": true}`); failures are `{"error": ...}` with 400, 404 or 500.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from moodlift.core.exceptions import MoodLiftException
from moodlift.core.store import RemoteStore, get_store
from moodlift.schemas.book import BookWrite
from moodlift.schemas.consultant import ConsultantWrite
from moodlift.schemas.game import GameWrite
from moodlift.schemas.seo import SeoMetadataUpdate
from moodlift.schemas.testimonial import TestimonialWrite
from moodlift.services.book_service import BookService
from moodlift.services.consultant_service import ConsultantService
from moodlift.services.game_service import GameService
from moodlift.services.seo_service import SeoService
from moodlift.services.testimonial_service import TestimonialService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def admin_error(e: MoodLiftException, fallback: Optional[str] = None) -> JSONResponse:
    """
    Render a service error for the dashboard

    Client errors keep their message; server errors use `fallback` when given.
    """
    message = e.message if e.status_code < 500 or fallback is None else fallback
    log = logger.warning if e.status_code < 500 else logger.error
    log(message, extra={"error_code": e.error_code.value, "cause": e.message})
    return JSONResponse(status_code=e.status_code, content={"error": message})


def _dump(model) -> dict:
    return model.model_dump(mode="json")


# Books

@router.get("/books")
async def admin_list_books(store: RemoteStore = Depends(get_store)):
    try:
        books = await BookService(store).list_books()
    except MoodLiftException as e:
        logger.error(f"Error fetching books: {e.message}")
        return {"error": "Failed to fetch books", "books": []}
    return {"books": [_dump(b) for b in books]}


@router.post("/books")
async def admin_create_book(payload: BookWrite, store: RemoteStore = Depends(get_store)):
    try:
        book = await BookService(store).create_book(payload)
    except MoodLiftException as e:
        return admin_error(e)
    return {"book": _dump(book)}


@router.put("/books")
async def admin_update_book(payload: BookWrite, store: RemoteStore = Depends(get_store)):
    try:
        book = await BookService(store).update_book(payload)
    except MoodLiftException as e:
        return admin_error(e)
    return {"book": _dump(book)}


@router.delete("/books")
async def admin_delete_book(id: Optional[str] = None, store: RemoteStore = Depends(get_store)):
    try:
        await BookService(store).delete_book(id)
    except MoodLiftException as e:
        return admin_error(e, "Failed to delete book")
    return {"success": True}


# Games

@router.get("/games")
async def admin_list_games(store: RemoteStore = Depends(get_store)):
    try:
        games = await GameService(store).list_games()
    except MoodLiftException as e:
        return admin_error(e, "Failed to fetch games")
    return {"games": [_dump(g) for g in games]}


@router.post("/games")
async def admin_create_game(payload: GameWrite, store: RemoteStore = Depends(get_store)):
    try:
        game = await GameService(store).create_game(payload)
    except MoodLiftException as e:
        return admin_error(e, "Failed to create game")
    return {"game": _dump(game)}


@router.put("/games")
async def admin_update_game(payload: GameWrite, store: RemoteStore = Depends(get_store)):
    try:
        game = await GameService(store).update_game(payload)
    except MoodLiftException as e:
        return admin_error(e, "Failed to update game")
    return {"game": _dump(game)}


@router.delete("/games")
async def admin_delete_game(id: Optional[str] = None, store: RemoteStore = Depends(get_store)):
    try:
        await GameService(store).delete_game(id)
    except MoodLiftException as e:
        return admin_error(e, "Failed to delete game")
    return {"success": True}


# Testimonials

@router.get("/testimonials")
async def admin_list_testimonials(store: RemoteStore = Depends(get_store)):
    try:
        testimonials = await TestimonialService(store).list_testimonials()
    except MoodLiftException as e:
        return admin_error(e, "Failed to fetch testimonials")
    return {"testimonials": [_dump(t) for t in testimonials]}


@router.post("/testimonials")
async def admin_create_testimonial(payload: TestimonialWrite, store: RemoteStore = Depends(get_store)):
    try:
        testimonial = await TestimonialService(store).create_testimonial(payload)
    except MoodLiftException as e:
        return admin_error(e, "Failed to create testimonial")
    return {"testimonial": _dump(testimonial)}


@router.put("/testimonials")
async def admin_update_testimonial(payload: TestimonialWrite, store: RemoteStore = Depends(get_store)):
    try:
        testimonial = await TestimonialService(store).update_testimonial(payload)
    except MoodLiftException as e:
        return admin_error(e, "Failed to update testimonial")
    return {"testimonial": _dump(testimonial)}


@router.delete("/testimonials")
async def admin_delete_testimonial(id: Optional[str] = None, store: RemoteStore = Depends(get_store)):
    try:
        await TestimonialService(store).delete_testimonial(id)
    except MoodLiftException as e:
        return admin_error(e, "Failed to delete testimonial")
    return {"success": True}


# Consultants

@router.get("/consultants")
async def admin_list_consultants(store: RemoteStore = Depends(get_store)):
    try:
        consultants = await ConsultantService(store).list_consultants()
    except MoodLiftException as e:
        logger.error(f"Error fetching consultants: {e.message}")
        return {"error": f"Failed to fetch consultants: {e.message}", "consultants": []}
    return {"consultants": [_dump(c) for c in consultants]}


@router.post("/consultants")
async def admin_create_consultant(payload: ConsultantWrite, store: RemoteStore = Depends(get_store)):
    try:
        consultant = await ConsultantService(store).create_consultant(payload)
    except MoodLiftException as e:
        return admin_error(e, f"Failed to create consultant: {e.message}")
    return {"consultant": _dump(consultant)}


@router.put("/consultants")
async def admin_update_consultant(payload: ConsultantWrite, store: RemoteStore = Depends(get_store)):
    try:
        consultant = await ConsultantService(store).update_consultant(payload)
    except MoodLiftException as e:
        return admin_error(e, f"Failed to update consultant: {e.message}")
    return {"consultant": _dump(consultant)}


@router.delete("/consultants")
async def admin_delete_consultant(id: Optional[str] = None, store: RemoteStore = Depends(get_store)):
    try:
        await ConsultantService(store).delete_consultant(id)
    except MoodLiftException as e:
        return admin_error(e, f"Failed to delete consultant: {e.message}")
    return {"success": True}


# SEO metadata

@router.get("/seo-metadata")
async def admin_list_seo_metadata(store: RemoteStore = Depends(get_store)):
    try:
        metadata = await SeoService(store).list_metadata()
    except MoodLiftException as e:
        return admin_error(e, "Failed to fetch metadata. Server configuration incomplete.")
    return {"metadata": [_dump(m) for m in metadata]}


@router.put("/seo-metadata")
async def admin_update_seo_metadata(payload: SeoMetadataUpdate, store: RemoteStore = Depends(get_store)):
    try:
        metadata = await SeoService(store).update_metadata(payload)
    except MoodLiftException as e:
        return admin_error(e, "Failed to update metadata. Server configuration incomplete.")
    return {"metadata": _dump(metadata)}
