"""
Bot Handlers Package

This package contains all bot command handlers:
- General commands (/start, /help)
- Chain game commands (/chain, /join, /g, ...)
- Error handlers for exception management
"""
