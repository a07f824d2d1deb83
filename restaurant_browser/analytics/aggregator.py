from __future__ import annotations

from collections import Counter
from typing import Any


def compute_usage(events: list[dict[str, Any]]) -> dict[str, Any]:
    """Summarise recompute events into filter usage figures."""
    recomputes = [e for e in events if e["type"] == "recompute"]
    total = len(recomputes)

    # Average recompute time
    times = [r["response_time_ms"] for r in recomputes if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 2) if times else 0.0

    # Top search queries
    search_counter: Counter[str] = Counter()
    for r in recomputes:
        if r.get("trigger") == "search" and r.get("search_query", "").strip():
            search_counter[r["search_query"].strip().lower()] += 1
    top_searches = [{"query": q, "count": c} for q, c in search_counter.most_common(10)]

    # Trigger and sort key breakdown
    trigger_usage = dict(Counter(r.get("trigger", "unknown") for r in recomputes))
    sort_usage = dict(Counter(r.get("sort_key", "trending") for r in recomputes))

    # Share of recomputes with each dimension narrowed
    filter_counts = {"category": 0, "search": 0, "price": 0}
    for r in recomputes:
        if r.get("category", "all") != "all":
            filter_counts["category"] += 1
        if r.get("search_query", "").strip():
            filter_counts["search"] += 1
        if r.get("price_tier", "all") != "all":
            filter_counts["price"] += 1
    filter_usage = {
        k: round(v / total * 100, 1) if total else 0.0
        for k, v in filter_counts.items()
    }

    empty = sum(1 for r in recomputes if r.get("results_returned", 0) == 0)

    return {
        "total_recomputes": total,
        "avg_recompute_time_ms": avg_time,
        "top_searches": top_searches,
        "trigger_usage": trigger_usage,
        "sort_usage": sort_usage,
        "filter_usage": filter_usage,
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
    }
