"""
Unit tests for the book, game, testimonial, consultant, FAQ and SEO services
"""
import pytest

from moodlift.core.exceptions import NotFoundError, RequestValidationFailed
from moodlift.models.faq import Faq
from moodlift.models.seo import SeoMetadata
from moodlift.schemas.book import BookWrite
from moodlift.schemas.consultant import ConsultantWrite
from moodlift.schemas.game import GameWrite
from moodlift.schemas.seo import SeoMetadataUpdate
from moodlift.services.book_service import BookService
from moodlift.services.consultant_service import ConsultantService
from moodlift.services.faq_service import FaqService
from moodlift.services.game_service import GameService
from moodlift.services.seo_service import SeoService
from moodlift.schemas import testimonial as testimonial_schemas
from moodlift.services import testimonial_service


async def seed_books(service):
    await service.create_book(BookWrite(title="Low", author="A", rating=2.0, mood_tags=["Needs Support"]))
    await service.create_book(BookWrite(title="High", author="B", rating=4.8, mood_tags=["Good", "Needs Support"]))
    await service.create_book(BookWrite(title="Unrated", author="C", mood_tags=["Good"]))


@pytest.mark.asyncio
async def test_create_book_applies_defaults(store):
    book = await BookService(store).create_book(BookWrite(title="Feeling Good", author="David Burns"))

    assert book.id
    assert book.cover_color == "#9b87f5"
    assert book.genre == "Self-Help"
    assert book.mood_tags == []
    assert book.rating is None
    assert book.created_at is not None


@pytest.mark.asyncio
async def test_create_book_requires_title_and_author(store):
    with pytest.raises(RequestValidationFailed) as exc:
        await BookService(store).create_book(BookWrite(title="No author"))
    assert exc.value.message == "Title and author are required"


@pytest.mark.asyncio
async def test_books_for_mood_ordered_by_rating(store):
    service = BookService(store)
    await seed_books(service)

    support = await service.list_for_mood("Needs Support")
    everything = await service.list_for_mood("Needs Support", show_all=True)
    limited = await service.list_for_mood(show_all=True, limit=1)

    assert [b.title for b in support] == ["High", "Low"]
    assert [b.title for b in everything] == ["High", "Low", "Unrated"]
    assert [b.title for b in limited] == ["High"]


@pytest.mark.asyncio
async def test_update_book(store):
    service = BookService(store)
    book = await service.create_book(BookWrite(title="Draft", author="A"))

    updated = await service.update_book(BookWrite(id=book.id, title="Final", rating=4.0))

    assert updated.title == "Final"
    assert updated.author == "A"
    assert updated.rating == 4.0


@pytest.mark.asyncio
async def test_update_book_errors(store):
    service = BookService(store)
    with pytest.raises(RequestValidationFailed):
        await service.update_book(BookWrite(title="No id"))
    with pytest.raises(NotFoundError):
        await service.update_book(BookWrite(id="missing", title="x"))


@pytest.mark.asyncio
async def test_delete_book(store):
    service = BookService(store)
    book = await service.create_book(BookWrite(title="Gone", author="A"))

    await service.delete_book(book.id)

    assert await service.get_book(book.id) is None
    with pytest.raises(RequestValidationFailed):
        await service.delete_book(None)


@pytest.mark.asyncio
async def test_create_game_joins_colors(store):
    game = await GameService(store).create_game(GameWrite(
        title="Box Breathing",
        description="Breathe in a square",
        color_from="#000000",
    ))

    assert game.colors == "#000000-#8B5CF6"
    assert game.color_from == "#000000"
    assert game.color_to == "#8B5CF6"
    assert game.category == "Breathing"
    assert game.icon == "heart"
    assert game.is_popular is False


@pytest.mark.asyncio
async def test_create_game_requires_title_and_description(store):
    with pytest.raises(RequestValidationFailed) as exc:
        await GameService(store).create_game(GameWrite(title="Only title"))
    assert exc.value.message == "Title and description are required"


@pytest.mark.asyncio
async def test_update_game_rewrites_colors(store):
    service = GameService(store)
    game = await service.create_game(GameWrite(
        title="Worry Box", description="d", color_from="#111111", color_to="#222222",
    ))

    updated = await service.update_game(GameWrite(id=game.id, is_popular=True))

    assert updated.is_popular is True
    assert updated.title == "Worry Box"
    assert updated.colors == "#3B82F6-#8B5CF6"


@pytest.mark.asyncio
async def test_catalog_merges_details_and_filters_category(store):
    service = GameService(store)
    await service.create_game(GameWrite(title="Box Breathing", description="d"))
    await service.create_game(GameWrite(title="Worry Box", description="d", category="Cognitive"))

    breathing = await service.list_catalog("Breathing")
    everything = await service.list_catalog()

    assert [g.title for g in breathing] == ["Box Breathing"]
    assert breathing[0].details.game_url == "/games/box-breathing"
    assert {g.title for g in everything} == {"Box Breathing", "Worry Box"}


@pytest.mark.asyncio
async def test_testimonial_crud(store):
    service = testimonial_service.TestimonialService(store)
    write = testimonial_schemas.TestimonialWrite

    first = await service.create_testimonial(write(user_name="Asha", feedback="Helped a lot", display_order=2))
    second = await service.create_testimonial(write(user_name="Ben", feedback="Calming", display_order=1))
    await service.create_testimonial(write(user_name="Cy", feedback="Hidden", is_active=False))

    assert first.rating == 5
    assert first.is_active is True

    active = await service.list_testimonials(active_only=True)
    assert [t.user_name for t in active] == ["Ben", "Asha"]
    assert len(await service.list_testimonials()) == 3

    updated = await service.update_testimonial(write(id=second.id, rating=4))
    assert updated.rating == 4
    assert updated.feedback == "Calming"

    await service.delete_testimonial(first.id)
    assert len(await service.list_testimonials()) == 2

    with pytest.raises(RequestValidationFailed):
        await service.create_testimonial(write(user_name="No feedback"))


@pytest.mark.asyncio
async def test_consultants_active_listing(store):
    service = ConsultantService(store)
    active = await service.create_consultant(ConsultantWrite(full_name="Dr. Rao", title="Psychologist"))
    await service.create_consultant(ConsultantWrite(full_name="Dr. Off", is_active=False))

    listed = await service.list_active()

    assert [c.full_name for c in listed] == ["Dr. Rao"]
    assert active.is_active is True
    assert len(await service.list_consultants()) == 2


@pytest.mark.asyncio
async def test_consultant_validation(store):
    service = ConsultantService(store)
    with pytest.raises(RequestValidationFailed) as exc:
        await service.create_consultant(ConsultantWrite(title="No name"))
    assert exc.value.message == "Full name is required"
    with pytest.raises(RequestValidationFailed):
        await service.update_consultant(ConsultantWrite(full_name="No id"))
    with pytest.raises(NotFoundError):
        await service.update_consultant(ConsultantWrite(id="missing", full_name="x"))


@pytest.mark.asyncio
async def test_faqs_for_page(store, db_session):
    db_session.add_all([
        Faq(page="books", question="Second?", answer="b", sort_order=2),
        Faq(page="books", question="First?", answer="a", sort_order=1),
        Faq(page="books", question="Hidden?", answer="c", sort_order=0, active=False),
        Faq(page="home", question="Elsewhere?", answer="d", sort_order=0),
    ])
    await db_session.commit()

    faqs = await FaqService(store).list_for_page("books")

    assert [f.question for f in faqs] == ["First?", "Second?"]
    with pytest.raises(RequestValidationFailed):
        await FaqService(store).list_for_page("")


@pytest.mark.asyncio
async def test_seo_update_and_lookup(store, db_session):
    row = SeoMetadata(page_url="/books", title="Books")
    db_session.add(row)
    await db_session.commit()
    service = SeoService(store)

    updated = await service.update_metadata(SeoMetadataUpdate(id=row.id, title="Mood Books", og_title="Read"))

    assert updated.title == "Mood Books"
    assert updated.og_title == "Read"
    assert (await service.get_for_page("/books")).title == "Mood Books"
    assert await service.get_for_page("/nothing") is None
    with pytest.raises(RequestValidationFailed):
        await service.update_metadata(SeoMetadataUpdate(title="No id"))


@pytest.mark.asyncio
async def test_sitemap_entries_include_seo_pages(store, db_session):
    db_session.add(SeoMetadata(page_url="/books/feeling-good"))
    await db_session.commit()

    entries = await SeoService(store).sitemap_entries()

    assert entries[-1].url.endswith("/books/feeling-good")


@pytest.mark.asyncio
async def test_sitemap_entries_fall_back_to_static(unconfigured_store):
    entries = await SeoService(unconfigured_store).sitemap_entries()

    assert entries
    assert not any(e.url.endswith("/books/feeling-good") for e in entries)
