"""
Modcase Discord Bot
===================

Entry point: loads the token, opens the database, wires the kick workflow into the
command cogs, and runs the bot until it is stopped.
"""

import os
import sys
from pathlib import Path


def resolve_base_dir() -> Path:
    """Determine the base directory of the project.

    Resolution order:
    1. MODCASE_HOME environment variable, if set.
    2. If running in a frozen/compiled context (e.g., PyInstaller, Nuitka), use the executable's directory.
    3. Otherwise, assume running from source and use the grandparent of this file's directory.
    """
    if env_home := os.getenv("MODCASE_HOME"):
        return Path(env_home).resolve()

    if getattr(sys, "frozen", False) or getattr(sys, "compiled", False):
        return Path(sys.argv[0]).resolve().parent

    return Path(__file__).resolve().parents[2]


BASE_DIR = resolve_base_dir()

import asyncio
import discord
from discord.ext import commands
from dotenv import load_dotenv

from modcase.configuration.app_configuration import CONFIG_PATH, AppConfig
from modcase.database.database import Database
from modcase.moderation.guild_logger import GuildLogger
from modcase.moderation.kick_workflow import KickWorkflow
from modcase.moderation.platform import DiscordPlatform
from modcase.services.audit_log_service import AuditLogService
from modcase.services.note_store_service import NoteStoreService
from modcase.util.logger import get_logger, handle_exception


logger = get_logger("main")


def load_environment() -> str:
    """Load environment variables and return the Discord bot token.

    Raises
    ------
    SystemExit
        If the required ``DISCORD_BOT_TOKEN`` variable is missing.
    """
    load_dotenv(dotenv_path=BASE_DIR / ".env")
    token = os.getenv("DISCORD_BOT_TOKEN")
    if not token:
        logger.critical("'DISCORD_BOT_TOKEN' environment variable not set. Bot cannot start.")
        sys.exit(1)
    return token


def build_intents() -> discord.Intents:
    """Intents for reading command messages and resolving guild members."""
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guilds = True
    intents.messages = True
    intents.members = True
    return intents


def load_cogs(discord_bot_instance: commands.Bot, database: Database, config: AppConfig) -> KickWorkflow:
    """Build the kick workflow, register all cogs with the bot and return the workflow."""
    from modcase.bot.cogs import events_listener, help_cmds, moderation_cmds

    note_store = NoteStoreService(database.connection_manager)
    workflow = KickWorkflow(
        platform=DiscordPlatform(discord_bot_instance),
        audit_log=AuditLogService(database.connection_manager),
        note_store=note_store,
        guild_logger=GuildLogger(discord_bot_instance, config),
        permission_notice_delete_after=config.permission_notice_delete_after,
    )

    events_listener.setup(discord_bot_instance)
    help_cmds.setup(discord_bot_instance)
    moderation_cmds.setup(discord_bot_instance, workflow, note_store)

    logger.info("All cogs loaded successfully.")
    return workflow


def create_bot(database: Database, config: AppConfig) -> tuple[commands.Bot, KickWorkflow]:
    """Instantiate the Discord bot and register all cogs."""
    bot = commands.Bot(
        command_prefix=config.command_prefix,
        intents=build_intents(),
        help_command=None,
    )
    workflow = load_cogs(bot, database, config)
    return bot, workflow


async def start_bot(bot: commands.Bot, token: str) -> None:
    """Start the Discord bot and log around the connection lifecycle."""
    logger.info("Attempting to connect to Discord…")
    try:
        await bot.start(token)
    except asyncio.CancelledError:
        logger.info("Discord bot start cancelled; shutting down")
    finally:
        logger.info("Discord bot start routine finished.")


async def shutdown_runtime(
    bot: commands.Bot | None,
    database: Database,
    workflow: KickWorkflow | None = None,
) -> None:
    """Close the bot connection, let pending audit writes finish, then close the database."""
    if bot is not None and not bot.is_closed():
        try:
            await bot.close()
        except Exception as exc:
            logger.exception("Error while closing the bot: %s", exc)

    if workflow is not None:
        await workflow.recorder.flush()

    try:
        await database.shutdown()
    except Exception as exc:
        logger.exception("Error during database shutdown: %s", exc)

    logger.info("Shutdown complete.")


async def async_main() -> int:
    """Bootstrap the database and the bot, returning an exit code."""
    token = load_environment()
    config = AppConfig(BASE_DIR / CONFIG_PATH)

    database = Database(config.database_path)
    logger.info("Initializing database...")
    if not await database.initialize():
        logger.critical("Failed to initialize database at %s", config.database_path)
        return 1

    try:
        bot, workflow = create_bot(database, config)
    except Exception as exc:
        logger.critical("Failed to initialize Discord bot: %s", exc)
        await shutdown_runtime(None, database)
        return 1

    exit_code = 0
    try:
        await start_bot(bot, token)
    except Exception as exc:
        logger.critical("Discord bot runtime error: %s", exc)
        exit_code = 1
    finally:
        await shutdown_runtime(bot, database, workflow)

    return exit_code


def main() -> int:
    """Entrypoint that runs the async runtime and returns the process exit code."""
    os.chdir(BASE_DIR)
    logger.info("Starting Modcase…")
    try:
        return asyncio.run(async_main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user.")
        return 0
    except SystemExit as exit_exc:
        code = exit_exc.code
        if isinstance(code, int):
            return code
        return 1
    except Exception as exc:
        logger.critical("An unexpected error occurred while running the bot: %s", exc)
        return 1


if __name__ == "__main__":
    sys.excepthook = handle_exception
    sys.exit(main())
