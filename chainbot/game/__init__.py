"""
Chain Game Package

This package contains the link-chain round engine:
- Candidate pool and key index
- Key usage tracking and link selection
- The round scheduler for free-join and elimination play
- The per-chat game manager
"""
