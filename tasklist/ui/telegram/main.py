from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import ExceptionTypeFilter
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import ErrorEvent

from tasklist.config import load_settings
from tasklist.domain.tasks.session import SessionRegistry
from tasklist.domain.tasks.ports import Clock
from tasklist.infra.clock.system_clock import SystemClock
from tasklist.infra.ids.uuid_gen import UuidGenerator
from tasklist.ui.telegram.handlers.cancel import router as cancel_router
from tasklist.ui.telegram.handlers.draft import router as draft_router
from tasklist.ui.telegram.handlers.start import router as start_router
from tasklist.ui.telegram.handlers.tasks import router as tasks_router
from tasklist.ui.telegram.middlewares.auth import OwnerOnlyMiddleware
from tasklist.ui.telegram.middlewares.di import DIMiddleware

logger = logging.getLogger(__name__)


def build_dispatcher(sessions: SessionRegistry, clock: Clock, date_format: str, owner_id: int) -> Dispatcher:
    dp = Dispatcher(storage=MemoryStorage())

    # --- middlewares ---
    if owner_id > 0:
        dp.message.middleware(OwnerOnlyMiddleware(owner_id))
        dp.callback_query.middleware(OwnerOnlyMiddleware(owner_id))

    dp.message.middleware(DIMiddleware(sessions, clock, date_format))
    dp.callback_query.middleware(DIMiddleware(sessions, clock, date_format))

    # --- routers ---
    # cancel first so /cancel wins over any FSM state handler
    dp.include_router(cancel_router)
    dp.include_router(start_router)
    dp.include_router(tasks_router)
    dp.include_router(draft_router)

    @dp.error(ExceptionTypeFilter(TelegramBadRequest))
    async def handle_old_callback_query(event: ErrorEvent) -> None:
        """Ignore TelegramBadRequest for old/invalid callback queries (e.g. after bot restart)."""
        msg = str(event.exception).lower()
        if "query is too old" in msg or "query id is invalid" in msg or "response timeout expired" in msg:
            logger.debug("Ignoring old/invalid callback query: %s", event.exception)
            return
        raise event.exception

    return dp


async def main() -> None:
    settings = load_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - [PID:%(process)d] - %(message)s",
    )

    # Sessions live in memory only; restarting the bot starts every chat empty.
    sessions = SessionRegistry(UuidGenerator())
    clock = SystemClock(settings.timezone)

    bot = Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = build_dispatcher(sessions, clock, settings.date_format, settings.owner_telegram_id)

    logger.info("Starting polling (owner_only=%s, tz=%s)", settings.owner_telegram_id > 0, settings.timezone)
    try:
        await dp.start_polling(bot)
    finally:
        logger.info("Bot shutdown, dropping %s session(s)", len(sessions))
        await bot.session.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
