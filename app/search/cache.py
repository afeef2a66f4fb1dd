"""
Purpose:
- Cache headers for browser, generic CDN and Vercel edge layers, all driven by one duration.
"""

from __future__ import annotations
from typing import Dict

def cache_headers(cache_time: int) -> Dict[str, str]:
    return {
        "Cache-Control": f"public, max-age={cache_time}, s-maxage={cache_time}",
        "CDN-Cache-Control": f"public, s-maxage={cache_time}",
        "Vercel-CDN-Cache-Control": f"public, s-maxage={cache_time}",
    }
