"""
Content Tables Package

Static name lists used as link candidates by the chain games.
"""
