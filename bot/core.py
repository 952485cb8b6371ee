# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                        PLANNING BOT CORE MODULE                            ║
# ║    Handles client setup, intents, and the message event lifecycle         ║
# ╚════════════════════════════════════════════════════════════════════════════╝

import discord

from bot.command_router import dispatch_message
from utils.logging import logger

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CLIENT INTENTS & INITIALIZATION                                            ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- create_client ---
# Builds the discord.Client with the intents the bot needs: guild messages and
# their content for text commands, and guild reactions for the date picker.
# Event handlers are registered on the returned client.
def create_client() -> discord.Client:
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.guild_reactions = True
    intents.message_content = True
    client = discord.Client(intents=intents)

    # --- on_ready ---
    # Triggered once the gateway session is established (and on reconnects).
    @client.event
    async def on_ready():
        logger.info(f"Bot Discord prêt ! Connecté en tant que {client.user}")

    # --- on_disconnect / on_resumed ---
    @client.event
    async def on_disconnect():
        logger.warning("Bot disconnected from Discord. Waiting for reconnection...")

    @client.event
    async def on_resumed():
        logger.info("Bot connection resumed")

    # --- on_message ---
    # Every text message goes through the command router.
    @client.event
    async def on_message(message: discord.Message):
        await dispatch_message(message, client)

    return client

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ ENTRY POINT                                                                ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- run_bot ---
# Connects to Discord and runs until the client is closed.
# Args:
#     token: The bot token.
async def run_bot(token: str):
    client = create_client()
    async with client:
        await client.start(token)
