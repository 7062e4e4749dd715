"""
Utilities Package

Configuration and logging helpers shared by the bot.
"""
