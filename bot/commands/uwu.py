"""
Handles the `uwu` trigger: replies with a fixed media link.
"""

import discord

from utils.logging import logger

UWU_TRIGGER = "uwu"
UWU_GIF = "https://i.imgur.com/zlLz40v.mp4"


async def handle_uwu_command(message: discord.Message):
    logger.debug(f"uwu trigger from {message.author}")
    return await message.channel.send(UWU_GIF)
