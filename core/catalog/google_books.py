# core/catalog/google_books.py

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

import requests

from core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://www.googleapis.com/books/v1/volumes"
MAX_RESULTS = 40


@dataclass
class SearchResult:
    """A book found through Google Books, shaped like a catalog book.

    The id is the Google volume id; adding the result to a library creates
    the catalog book under that same id.
    """
    id: str
    title: str
    author: str
    cover_image: str = ''
    description: str = ''
    genre: str = 'General'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_volume(cls, volume: Dict[str, Any]) -> Optional["SearchResult"]:
        info = volume.get("volumeInfo") or {}
        if not volume.get("id") or not info.get("title"):
            return None
        authors = info.get("authors") or []
        categories = info.get("categories") or []
        image_links = info.get("imageLinks") or {}
        return cls(
            id=volume["id"],
            title=info["title"],
            author=", ".join(authors) or "Unknown",
            cover_image=image_links.get("thumbnail", ""),
            description=info.get("description", ""),
            genre=categories[0] if categories else "General",
        )


class GoogleBooksClient:
    """Searches the Google Books volumes API."""

    def __init__(self, base_url: str = DEFAULT_URL, timeout: float = 10, api_key: Optional[str] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.api_key = api_key

    def search(self, query: str, limit: int = 20) -> List[SearchResult]:
        """Search volumes matching a free-text query.
        
        Args:
            query: The search terms
            limit: Maximum number of results to return (capped at 40 by the API)
            
        Returns:
            List of SearchResult objects, volumes without a title are skipped
            
        Raises:
            ValidationError: If the query is blank
            ExternalServiceError: If the request fails or the response is not JSON
        """
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query must not be empty")

        params = {"q": query, "maxResults": max(1, min(limit, MAX_RESULTS))}
        if self.api_key:
            params["key"] = self.api_key

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning("Google Books request failed: %s", e)
            raise ExternalServiceError("Failed to fetch from Google Books")
        except ValueError:
            logger.warning("Google Books returned an invalid response")
            raise ExternalServiceError("Failed to fetch from Google Books")

        results = []
        for volume in data.get("items") or []:
            result = SearchResult.from_volume(volume)
            if result is not None:
                results.append(result)
        return results
