"""
Interactive browsing layer.

Responsibilities:
- Hold the active query state (category, search text, price tier, sort key).
- Rate-limit free-text search input with a debounce window.
- Recompute the filtered list on every change and hand it to a renderer.
"""
