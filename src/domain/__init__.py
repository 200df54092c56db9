"""Tick constants and interval arithmetic.

Nothing here prints or talks to the scheduler, so the runner's timing
rules can be checked without an event loop.
"""
