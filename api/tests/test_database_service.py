import pytest

from models import EXCLUSION_SENTINEL, Cat
from services import DatabaseService
from services.database_service import to_async_url
from services.exceptions import PersistenceError


def test_to_async_url():
    assert to_async_url("postgresql://u:p@db:5432/cats") == "postgresql+asyncpg://u:p@db:5432/cats"
    assert to_async_url("postgres://u:p@db/cats") == "postgresql+asyncpg://u:p@db/cats"
    assert to_async_url("sqlite+aiosqlite:///cats.db") == "sqlite+aiosqlite:///cats.db"


@pytest.mark.asyncio
async def test_persist_assigns_id_once(database_service):
    cat = Cat(image="img", count=1)

    cat_id = await database_service.persist_or_update(cat)
    assert cat.id == cat_id
    assert len(cat_id) == 32

    cat.count = 7
    assert await database_service.persist_or_update(cat) == cat_id

    stored = await database_service.find_by_id(cat_id)
    assert stored == cat
    assert stored.count == 7
    assert await database_service.count() == 1


@pytest.mark.asyncio
async def test_persist_keeps_unset_safety_flag(database_service):
    cat_id = await database_service.persist_or_update(Cat(image="img"))

    stored = await database_service.find_by_id(cat_id)

    assert stored.is_safe_for_work is None


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(database_service):
    assert await database_service.find_by_id("nope") is None


@pytest.mark.asyncio
async def test_find_all_only_safe(database_service):
    await database_service.persist_or_update(Cat(image="a", is_safe_for_work=True))
    await database_service.persist_or_update(Cat(image="b", is_safe_for_work=False))
    await database_service.persist_or_update(Cat(image="c"))

    safe = await database_service.find_all(only_safe=True)

    assert [cat.image for cat in safe] == ["a"]
    assert await database_service.count(only_safe=True) == 1
    assert await database_service.count() == 3


@pytest.mark.asyncio
async def test_top_three_by_count_excludes_unsafe_cat(database_service):
    for count in (2, 5, 3, 1):
        await database_service.persist_or_update(Cat(image=f"cat{count}", count=count, is_safe_for_work=True))
    await database_service.persist_or_update(
        Cat(image="unsafe", count=EXCLUSION_SENTINEL, is_safe_for_work=False)
    )

    top = await database_service.find_all(order_by_count=True, page_size=3)

    assert [cat.count for cat in top] == [5, 3, 2]
    assert "unsafe" not in [cat.image for cat in top]


@pytest.mark.asyncio
async def test_paging_and_search(database_service):
    ids = []
    for i in range(5):
        ids.append(await database_service.persist_or_update(Cat(image=f"img{i}")))

    first = await database_service.find_all(page_index=0, page_size=2)
    second = await database_service.find_all(page_index=1, page_size=2)
    third = await database_service.find_all(page_index=2, page_size=2)

    seen = [cat.id for cat in first + second + third]
    assert [len(first), len(second), len(third)] == [2, 2, 1]
    assert sorted(seen) == sorted(ids)

    matches = await database_service.find_all(search=ids[3])
    assert [cat.id for cat in matches] == [ids[3]]
    assert await database_service.count(search=ids[3]) == 1


@pytest.mark.asyncio
async def test_find_ids(database_service):
    ids = {await database_service.persist_or_update(Cat(image="x")) for _ in range(3)}

    assert set(await database_service.find_ids()) == ids


@pytest.mark.asyncio
async def test_delete_by_id(database_service):
    cat_id = await database_service.persist_or_update(Cat(image="x"))

    assert await database_service.delete_by_id(cat_id) is True
    assert await database_service.delete_by_id(cat_id) is False
    assert await database_service.find_by_id(cat_id) is None


@pytest.mark.asyncio
async def test_delete_all_then_count_is_zero(database_service):
    for _ in range(4):
        await database_service.persist_or_update(Cat(image="x"))

    assert await database_service.delete_all() == 4
    assert await database_service.count() == 0


@pytest.mark.asyncio
async def test_store_failure_raises_persistence_error(tmp_path):
    service = DatabaseService(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        # No tables were created
        with pytest.raises(PersistenceError):
            await service.count()
    finally:
        await service.close()
