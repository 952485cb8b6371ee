"""
bot package: Discord client wiring, command routing and the planning
command handlers.
"""
