"""TelegramClient — the upload/format/results surface via python-telegram-bot."""
import logging
from typing import Awaitable, Callable, Optional

from telegram import Message, Update
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from src.config import Config
from src.constants import (
    CMD_FORMAT,
    CMD_HELP,
    CMD_RETRY,
    CMD_STATUS,
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_PHOTO_MIME,
    DEFAULT_PHOTO_NAME,
    FORMAT_LABELS,
    MSG_BLOCKED_CHAT,
    MSG_ERROR_PREFIX,
    MSG_FORMAT_SET,
    MSG_FORMAT_USAGE,
    MSG_HELP,
    MSG_IMAGE_READ_FAILED,
    MSG_SEND_FAIL,
    MSG_SUPERSEDED,
)
from src.errors import ImageReadError, UserInputError
from src.image_encoder import encode_bytes
from src.models import ImagePayload, OutputFormat
from src.presentation import render, split_message
from src.session import TranscriptionSession
from src.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)

Handler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]
ChatHandler = Callable[[str, Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


def _digits(s: str) -> str:
    return "".join(c for c in s if c.isdigit())


class TelegramClient:

    def __init__(self, config: Config, transcriber: TranscriptionClient) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._default_format = config.default_output_format
        self._transcriber = transcriber
        self._sessions: dict[str, TranscriptionSession] = {}
        self._app: Optional[Application] = None

    def build_application(self) -> Application:
        """Application with every handler registered.

        Updates are processed concurrently so a new image or format can arrive
        while an earlier transcription is still loading.
        """
        app = Application.builder().token(self._token).concurrent_updates(True).build()
        app.add_handler(
            TGMessageHandler(
                filters.PHOTO | filters.Document.IMAGE,
                self._make_handler(self._on_image),
            )
        )
        app.add_handler(CommandHandler(CMD_FORMAT, self._make_handler(self._on_format)))
        app.add_handler(CommandHandler(CMD_RETRY, self._make_handler(self._on_retry)))
        app.add_handler(CommandHandler(CMD_STATUS, self._make_handler(self._on_status)))
        app.add_handler(CommandHandler(CMD_HELP, self._make_handler(self._on_help)))
        app.add_handler(CommandHandler("start", self._make_handler(self._on_help)))
        return app

    def run(self) -> None:
        self._app = self.build_application()
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> Optional[Message]:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return None
            case app:
                try:
                    return await app.bot.send_message(chat_id=int(to), text=text)
                except TelegramError as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    return None

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        return _digits(str(update.effective_chat.id)) == _digits(self._allowed_chat_id)

    def _session_for(self, chat_id: str) -> TranscriptionSession:
        match self._sessions.get(chat_id):
            case None:
                session = TranscriptionSession(self._transcriber, self._default_format)
                self._sessions[chat_id] = session
                return session
            case session:
                return session

    @staticmethod
    async def _download_image(message: Message) -> ImagePayload:
        """Fetch the photo or image document attached to ``message``. Raises ImageReadError."""
        match (message.photo, message.document):
            case ([*_, largest], _):
                source, name, mime = largest, DEFAULT_PHOTO_NAME, DEFAULT_PHOTO_MIME
            case (_, document) if document is not None:
                source = document
                name = document.file_name or DEFAULT_DOCUMENT_NAME
                mime = document.mime_type
            case _:
                raise ImageReadError(MSG_IMAGE_READ_FAILED % (DEFAULT_PHOTO_NAME, "no image attached"))
        try:
            tg_file = await source.get_file()
            data = bytes(await tg_file.download_as_bytearray())
        except (TelegramError, OSError) as exc:
            logger.warning("Image download failed for %s: %s", name, exc)
            raise ImageReadError(MSG_IMAGE_READ_FAILED % (name, exc)) from exc
        return encode_bytes(data, name, mime)

    # ── handlers ──────────────────────────────────────────────────────────────

    def _make_handler(self, callback: ChatHandler) -> Handler:
        """Wrap ``callback`` with the allowed-chat check and resolve the sender id."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass
            await callback(str(update.effective_chat.id), update, context)

        return _handler

    async def _on_image(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        if update.message is None:
            return
        try:
            payload = await self._download_image(update.message)
        except ImageReadError as exc:
            await self.send_message(sender, MSG_ERROR_PREFIX % exc)
            return
        session = self._session_for(sender)
        await self._present(sender, session, session.select_image(payload))

    async def _on_format(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        raw = " ".join(context.args or [])
        match raw.strip():
            case "":
                await self.send_message(sender, MSG_FORMAT_USAGE)
                return
            case value:
                try:
                    output_format = OutputFormat.parse(value)
                except UserInputError as exc:
                    await self.send_message(sender, f"{MSG_ERROR_PREFIX % exc}\n{MSG_FORMAT_USAGE}")
                    return
        session = self._session_for(sender)
        task = session.set_output_format(output_format)
        await self.send_message(sender, MSG_FORMAT_SET % FORMAT_LABELS[output_format.value])
        if task is not None:
            await self._present(sender, session, task)

    async def _on_retry(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        session = self._session_for(sender)
        await self._present(sender, session, session.request_transcription())

    async def _on_status(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        await self.send_message(sender, render(self._session_for(sender).snapshot()))

    async def _on_help(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        await self.send_message(sender, MSG_HELP)

    # ── presentation ──────────────────────────────────────────────────────────

    async def _present(
        self,
        sender: str,
        session: TranscriptionSession,
        task: Optional[Awaitable[bool]],
    ) -> None:
        """Show the current state, then edit it in place once ``task`` resolves."""
        generation = session.snapshot().generation
        status = await self.send_message(sender, render(session.snapshot()))
        match task:
            case None:
                return
            case _:
                applied = await task

        snapshot = session.snapshot()
        match applied and snapshot.generation == generation:
            case False:
                await self._edit_or_send(sender, status, MSG_SUPERSEDED)
            case True:
                match split_message(render(snapshot)):
                    case []:
                        pass
                    case [first, *rest]:
                        await self._edit_or_send(sender, status, first)
                        for chunk in rest:
                            await self.send_message(sender, chunk)

    async def _edit_or_send(self, sender: str, status: Optional[Message], text: str) -> None:
        match status:
            case None:
                await self.send_message(sender, text)
            case message:
                try:
                    await message.edit_text(text)
                except TelegramError as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    await self.send_message(sender, text)
