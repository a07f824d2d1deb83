"""
Filter pipeline for the restaurant browser.

Responsibilities:
- Classify restaurants into budget / moderate / premium price tiers.
- Narrow the dataset by category, free-text search and price tier.
- Order the surviving restaurants by the selected sort key.
"""
