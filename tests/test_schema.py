"""Schema self-migration tests."""

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncSession

from cms_admin.db import SchemaGuard
from cms_admin.schema import POSITIONED_TABLES, ensure_schema
from cms_admin.services import FaqRepository


async def columns(engine, table):
    async with engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: {col["name"] for col in inspect(sync_conn).get_columns(table)}
        )


async def create_legacy_tables(engine):
    """Tables as they were before ordering and banner gifs existed."""
    async with engine.begin() as conn:
        await conn.execute(
            text(
                "CREATE TABLE faqs (id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "question TEXT NOT NULL, answer TEXT NOT NULL)"
            )
        )
        await conn.execute(
            text(
                "CREATE TABLE banners (id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "title TEXT NOT NULL, subtitle TEXT NOT NULL, message TEXT NOT NULL)"
            )
        )
        for question in ("first", "second", "third"):
            await conn.execute(
                text("INSERT INTO faqs (question, answer) VALUES (:q, 'a')"), {"q": question}
            )
        # Out-of-order IDs: backfill follows ID, not insertion order
        await conn.execute(text("INSERT INTO faqs (id, question, answer) VALUES (10, 'tenth', 'a')"))
        await conn.execute(text("INSERT INTO faqs (id, question, answer) VALUES (5, 'fifth', 'a')"))


async def test_fresh_database_gets_every_table(bare_engine):
    async with bare_engine.begin() as conn:
        applied = await ensure_schema(conn)

    assert applied == []
    for table in POSITIONED_TABLES:
        assert "position" in await columns(bare_engine, table)
    assert "gif" in await columns(bare_engine, "banners")
    assert "isActive" in await columns(bare_engine, "classes")


async def test_legacy_tables_are_migrated(bare_engine):
    await create_legacy_tables(bare_engine)

    async with bare_engine.begin() as conn:
        applied = await ensure_schema(conn)

    assert applied == ["faqs.position", "banners.gif"]
    assert "gif" in await columns(bare_engine, "banners")

    async with bare_engine.connect() as conn:
        result = await conn.execute(text("SELECT id, question, position FROM faqs ORDER BY id"))
        rows = [tuple(row) for row in result]
    assert rows == [
        (1, "first", 0),
        (2, "second", 1),
        (3, "third", 2),
        (5, "fifth", 3),
        (10, "tenth", 4),
    ]


async def test_migration_is_idempotent(bare_engine):
    await create_legacy_tables(bare_engine)

    async with bare_engine.begin() as conn:
        await ensure_schema(conn)
    async with bare_engine.begin() as conn:
        assert await ensure_schema(conn) == []

    async with bare_engine.connect() as conn:
        result = await conn.execute(text("SELECT position FROM faqs ORDER BY id"))
        assert list(result.scalars()) == [0, 1, 2, 3, 4]


async def test_migrated_collection_appends_after_backfill(bare_engine):
    await create_legacy_tables(bare_engine)
    async with bare_engine.begin() as conn:
        await ensure_schema(conn)

    async with AsyncSession(bare_engine, expire_on_commit=False) as session:
        faq = await FaqRepository(session).create({"question": "new", "answer": "a"})
        assert faq.position == 5
        assert (await FaqRepository(session).check_density()).is_dense


async def test_schema_guard_runs_once(bare_engine):
    guard = SchemaGuard()
    await create_legacy_tables(bare_engine)

    assert await guard.ensure(bare_engine) == ["faqs.position", "banners.gif"]
    assert guard.ready
    assert await guard.ensure(bare_engine) == []


async def test_failing_table_does_not_stop_the_others(bare_engine, caplog):
    async with bare_engine.begin() as conn:
        # A view cannot be altered, so adding faqs.position fails
        await conn.execute(
            text("CREATE VIEW faqs AS SELECT 1 AS id, 'q' AS question, 'a' AS answer")
        )
        await conn.execute(
            text(
                "CREATE TABLE reviews (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL, "
                "review TEXT NOT NULL, rating INTEGER NOT NULL, date TEXT NOT NULL)"
            )
        )
        for name in ("Ann", "Bob"):
            await conn.execute(
                text(
                    "INSERT INTO reviews (name, review, rating, date) "
                    "VALUES (:name, 'ok', 5, '2024-05-01')"
                ),
                {"name": name},
            )

    async with bare_engine.begin() as conn:
        applied = await ensure_schema(conn)

    assert "faqs.position" not in applied
    assert "reviews.position" in applied
    assert "Migration faqs.position skipped or failed" in caplog.text

    async with bare_engine.connect() as conn:
        result = await conn.execute(text("SELECT position FROM reviews ORDER BY id"))
        assert list(result.scalars()) == [0, 1]
