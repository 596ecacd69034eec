"""Telegram bot integration for Tally."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from groq import AsyncGroq
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from ..intents import ClassifierConfig, GroqLLMClient, IntentClassifier
from ..logging import JSONLLogger, get_logger
from ..models import Sender
from ..service import InteractionService
from ..store import SQLiteKVStore, StoreConfig

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096


@dataclass
class BotConfig:
    """Transport settings for the bot.

    When webhook_url is set the bot registers a webhook and serves it on
    listen:port/webhook_path; otherwise it long-polls.
    """

    webhook_url: str | None = None
    webhook_path: str = "_wh/telegram"
    listen: str = "0.0.0.0"
    port: int = 8443
    secret_token: str | None = None

    @property
    def use_webhook(self) -> bool:
        return bool(self.webhook_url)


def _config_from_env() -> tuple[BotConfig, StoreConfig, ClassifierConfig]:
    """Load configuration from environment variables."""
    bot_config = BotConfig(
        webhook_url=os.getenv("TALLY_WEBHOOK_URL") or None,
        webhook_path=os.getenv("TALLY_WEBHOOK_PATH", "_wh/telegram"),
        listen=os.getenv("TALLY_LISTEN", "0.0.0.0"),
        port=int(os.getenv("TALLY_PORT", "8443")),
        secret_token=os.getenv("TALLY_WEBHOOK_SECRET") or None,
    )

    db_path = os.getenv("TALLY_DB_PATH")
    store_config = StoreConfig(db_path=Path(db_path) if db_path else None)

    return bot_config, store_config, ClassifierConfig.from_env()


def truncate_message(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """Truncate message to fit Telegram limits."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 20] + "\n... [truncated]"


def sender_from_update(update: Update) -> Sender:
    """Extract the message author from an update."""
    assert update.effective_user is not None
    assert update.effective_chat is not None
    user = update.effective_user
    return Sender(
        id=user.id,
        chat_id=update.effective_chat.id,
        first_name=user.first_name,
        last_name=user.last_name,
        username=user.username,
    )


class TelegramBot:
    """Telegram bot for Tally."""

    def __init__(
        self,
        token: str | None = None,
        bot_config: BotConfig | None = None,
        store_config: StoreConfig | None = None,
        classifier_config: ClassifierConfig | None = None,
        json_logger: JSONLLogger | None = None,
    ) -> None:
        self.token = token or os.getenv("TELEGRAM_TOKEN")
        if not self.token:
            raise ValueError("TELEGRAM_TOKEN not set")

        # Load config from env if not provided
        env_bot, env_store, env_classifier = _config_from_env()
        self.bot_config = bot_config or env_bot
        store_config = store_config or env_store
        classifier_config = classifier_config or env_classifier

        assert store_config.db_path is not None
        self.store = SQLiteKVStore(store_config.db_path)
        self.store.init_db()

        groq_client = AsyncGroq(api_key=os.getenv("GROQ_API_KEY"))
        llm = GroqLLMClient(groq_client, model=classifier_config.model)
        classifier = IntentClassifier(llm, classifier_config)

        self.json_logger = json_logger or get_logger()
        self.service = InteractionService(
            self.store, classifier, json_logger=self.json_logger
        )
        self._app: Application | None = None

    async def _handle_message(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /start and plain text messages."""
        assert update.message is not None
        assert update.message.text is not None

        sender = sender_from_update(update)
        try:
            reply = await self.service.handle_message(sender, update.message.text)
        except Exception as e:
            logger.exception("Error processing message")
            self.json_logger.log_error(str(e), chat_id=str(sender.chat_id))
            await update.message.reply_text(f"❌ Error: {e}")
            return

        await update.message.reply_text(truncate_message(reply or "…"))

    async def _post_shutdown(self, application: Application) -> None:
        """Called after Application.shutdown()."""
        self.store.close()

    def build_app(self) -> Application:
        """Build the Telegram application."""
        self._app = (
            Application.builder()
            .token(self.token)
            .post_shutdown(self._post_shutdown)
            .build()
        )

        self._app.add_handler(CommandHandler("start", self._handle_message))
        self._app.add_handler(
            MessageHandler(filters.TEXT & ~filters.COMMAND, self._handle_message)
        )

        return self._app

    def run(self) -> None:
        """Run the bot (blocking)."""
        app = self.build_app()
        config = self.bot_config

        if config.use_webhook:
            webhook_url = f"{config.webhook_url.rstrip('/')}/{config.webhook_path}"
            logger.info(f"Serving Telegram webhook at {webhook_url}")
            app.run_webhook(
                listen=config.listen,
                port=config.port,
                url_path=config.webhook_path,
                webhook_url=webhook_url,
                secret_token=config.secret_token,
            )
            return

        logger.info("Starting Telegram bot...")
        app.run_polling()
