"""
In-memory interaction analytics for a browsing session.

Each session keeps its own log; nothing is shared or persisted.
"""
