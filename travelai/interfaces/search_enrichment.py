"""
Search Enrichment Adapter
Wraps SerpAPI web, news and image search and normalizes the results into
SearchResponse records with a short textual summary.

enrich() fans out the requested sub-searches concurrently and fails as a
whole when any of them fails; callers treat enrichment as optional.
"""

import asyncio
from typing import Dict, Any, List, Optional

import httpx
from loguru import logger

from ..config import settings
from ..schemas import SearchResult, SearchParameters, SearchResponse, EnrichmentResult
from ..utils import contains_any


TRAVEL_KEYWORDS = [
    "hotel", "flight", "travel", "vacation", "trip", "destination", "booking",
    "airline", "airport", "accommodation", "resort", "tour", "activity",
    "restaurant", "attraction", "visa", "passport", "currency", "weather",
    "visit", "explore", "journey", "adventure", "holiday", "tourism"
]

TRAVEL_QUERY_SUFFIX = "travel guide tips recommendations"

SUMMARY_SNIPPET_CHARS = 200


class SearchError(Exception):
    """A sub-search failed. kind is one of web, news, image."""

    LABELS = {"web": "Search", "news": "News search", "image": "Image search"}

    def __init__(self, kind: str, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{self.LABELS.get(kind, 'Search')} failed: {detail}")


class SearchEnrichmentAdapter:
    """
    Real-time search context for the travel assistant.
    Disabled (is_configured == False) when no SerpAPI key is set.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        default_location: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.api_key = settings.SERPAPI_KEY if api_key is None else api_key
        self.base_url = base_url or settings.SERPAPI_BASE_URL
        self.timeout = timeout or settings.SEARCH_TIMEOUT
        self.default_location = default_location or settings.SEARCH_DEFAULT_LOCATION
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    async def _get_json(self, params: Dict[str, Any]) -> Dict[str, Any]:
        params = {**params, "api_key": self.api_key}

        if self._http_client is not None:
            response = await self._http_client.get(self.base_url, params=params, timeout=self.timeout)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params)

        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected response body ({type(data).__name__})")
        if data.get("error"):
            raise ValueError(data["error"])
        return data

    # ============================================
    # Sub-searches
    # ============================================

    async def search(
        self,
        query: str,
        location: Optional[str] = None,
        num: int = 8,
        device: str = "desktop"
    ) -> SearchResponse:
        """Google web search"""
        params = {
            "q": query,
            "engine": "google",
            "location": location or self.default_location,
            "google_domain": "google.com",
            "gl": "us",
            "hl": "en",
            "num": num,
            "device": device
        }

        try:
            data = await self._get_json(params)

            results = [
                SearchResult(
                    title=item.get("title") or "",
                    link=item.get("link") or "",
                    snippet=item.get("snippet") or "",
                    position=item.get("position") or index + 1,
                    displayed_link=item.get("displayed_link") or item.get("link")
                )
                for index, item in enumerate((data.get("organic_results") or [])[:num])
            ]

            related = [
                item.get("query", "") if isinstance(item, dict) else str(item)
                for item in (data.get("related_searches") or [])[:5]
            ]

            return SearchResponse(
                search_parameters=SearchParameters(query=query, type="web_search", location=location),
                organic_results=results,
                related_searches=related,
                summary=self.generate_summary(query, results)
            )
        except Exception as e:
            logger.warning(f"SerpAPI search error: {e}")
            raise SearchError("web", str(e) or type(e).__name__) from e

    async def search_news(
        self,
        query: str,
        location: Optional[str] = None,
        num: int = 6
    ) -> SearchResponse:
        """Google News search"""
        params = {
            "q": query,
            "engine": "google_news",
            "location": location or self.default_location,
            "gl": "us",
            "hl": "en",
            "num": num
        }

        try:
            data = await self._get_json(params)

            results = []
            for index, item in enumerate((data.get("news_results") or [])[:num]):
                source = item.get("source")
                if isinstance(source, dict):
                    source = source.get("name")
                results.append(SearchResult(
                    title=item.get("title") or "",
                    link=item.get("link") or "",
                    snippet=item.get("snippet") or "",
                    position=index + 1,
                    displayed_link=source or item.get("link")
                ))

            return SearchResponse(
                search_parameters=SearchParameters(query=query, type="news_search", location=location),
                organic_results=results,
                summary=self.generate_summary(query, results, kind="news")
            )
        except Exception as e:
            logger.warning(f"SerpAPI news search error: {e}")
            raise SearchError("news", str(e) or type(e).__name__) from e

    async def search_images(self, query: str, num: int = 6) -> SearchResponse:
        """Google Images search"""
        params = {
            "q": query,
            "engine": "google_images",
            "num": num
        }

        try:
            data = await self._get_json(params)

            results = [
                SearchResult(
                    title=item.get("title") or "",
                    link=item.get("original") or item.get("link") or "",
                    snippet=item.get("source") or "",
                    position=index + 1,
                    displayed_link=item.get("source") or ""
                )
                for index, item in enumerate((data.get("images_results") or [])[:num])
            ]

            summary = (
                f'Found {len(results)} images related to "{query}". '
                "These images can help visualize and plan your travel experience."
            )

            return SearchResponse(
                search_parameters=SearchParameters(query=query, type="image_search"),
                organic_results=results,
                summary=summary
            )
        except Exception as e:
            logger.warning(f"SerpAPI image search error: {e}")
            raise SearchError("image", str(e) or type(e).__name__) from e

    # ============================================
    # Summary & helpers
    # ============================================

    @staticmethod
    def generate_summary(query: str, results: List[SearchResult], kind: str = "web") -> str:
        """Short textual summary built from the top snippets"""
        if not results:
            return f'No {kind} results found for "{query}". Try a different search term or check your spelling.'

        type_text = {"news": "news articles", "image": "images"}.get(kind, "search results")
        summary = f'Found {len(results)} {type_text} for "{query}". '

        top_snippets = [r.snippet for r in results[:3] if r.snippet]
        if top_snippets:
            key_info = " ".join(top_snippets)[:SUMMARY_SNIPPET_CHARS]
            ellipsis = "..." if len(key_info) >= SUMMARY_SNIPPET_CHARS else ""
            summary += f"Key information: {key_info}{ellipsis}"

        return summary

    @staticmethod
    def is_travel_query(query: str) -> bool:
        return contains_any(query, TRAVEL_KEYWORDS)

    # ============================================
    # Fan-out
    # ============================================

    async def enrich(
        self,
        query: str,
        location: Optional[str] = None,
        include_news: bool = False,
        include_images: bool = False
    ) -> EnrichmentResult:
        """
        Run web search (always) plus news/image search when requested.

        Raises:
            SearchError: if any requested sub-search fails
        """
        coros = [self.search(query, location=location, num=6)]

        news_query = f"{query} {TRAVEL_QUERY_SUFFIX}" if self.is_travel_query(query) else query
        if include_news:
            coros.append(self.search_news(news_query, location=location, num=4))
        if include_images:
            coros.append(self.search_images(query, num=4))

        tasks = [asyncio.ensure_future(coro) for coro in coros]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # first failure wins; siblings are not left running
            for task in tasks:
                task.cancel()
            raise

        web_results = results[0]
        news_results = results[1] if include_news else None
        image_results = results[2 if include_news else 1] if include_images else None

        logger.info(
            f"Enrichment for '{query[:50]}': web={len(web_results.organic_results)}, "
            f"news={len(news_results.organic_results) if news_results else '-'}, "
            f"images={len(image_results.organic_results) if image_results else '-'}"
        )

        return EnrichmentResult(
            web_results=web_results,
            news_results=news_results,
            image_results=image_results
        )
