from dataclasses import dataclass
import os

from dotenv import load_dotenv

from tasklist.domain.tasks.formatting import DEFAULT_DATE_FORMAT

load_dotenv()


@dataclass(frozen=True)
class Settings:
    bot_token: str
    owner_telegram_id: int
    timezone: str
    date_format: str
    log_level: str


def load_settings() -> Settings:
    bot_token = os.getenv("BOT_TOKEN", "").strip()
    owner_raw = os.getenv("OWNER_TELEGRAM_ID", "0").strip() or "0"
    tz = os.getenv("TZ", "UTC").strip() or "UTC"
    date_format = os.getenv("DATE_FORMAT", DEFAULT_DATE_FORMAT).strip() or DEFAULT_DATE_FORMAT
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    if not bot_token:
        raise RuntimeError("BOT_TOKEN missing in .env")
    try:
        owner_id = int(owner_raw)
    except ValueError:
        raise RuntimeError("OWNER_TELEGRAM_ID must be an integer") from None

    # owner_id == 0 means anyone may use the bot
    return Settings(
        bot_token=bot_token,
        owner_telegram_id=owner_id,
        timezone=tz,
        date_format=date_format,
        log_level=log_level,
    )
