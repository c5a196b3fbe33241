"""
Blog API client - fetch posts pages and probe image URLs
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests
from pydantic import ValidationError

from .schemas import BlogPost, PostsPage

logger = logging.getLogger(__name__)

USER_AGENT = "blogcards/0.1.0"


class FetchError(RuntimeError):
    """Raised when blog data cannot be fetched or parsed."""


class BlogClient:
    """Read posts from the blog JSON API"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def fetch_page(self, page: int = 1, limit: int = 12) -> PostsPage:
        """
        Fetch one page of posts

        Args:
            page: 1-indexed page number
            limit: Posts per page

        Returns:
            PostsPage with posts and pagination

        Raises:
            FetchError: On transport, HTTP or payload errors
        """
        data = self._get_json("/api/blog-posts", params={"page": page, "limit": limit})
        try:
            return PostsPage.model_validate(data)
        except ValidationError as exc:
            raise FetchError(f"Invalid posts payload for page {page}") from exc

    def fetch_featured(self) -> Optional[BlogPost]:
        """Fetch the featured post, None when the API has none"""
        data = self._get_json("/api/blog-posts/featured", allow_missing=True)
        if not data:
            return None
        try:
            return BlogPost.model_validate(data)
        except ValidationError as exc:
            raise FetchError("Invalid featured post payload") from exc

    @staticmethod
    def load_page_file(path: str) -> PostsPage:
        """Load a posts page saved as JSON"""
        page_file = Path(path).expanduser()
        if not page_file.exists():
            raise FileNotFoundError(f"Posts file not found: {page_file}")
        try:
            data = json.loads(page_file.read_text(encoding="utf-8"))
            return PostsPage.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise FetchError(f"Unable to read posts file: {page_file}") from exc

    def _get_json(
        self,
        path: str,
        params: Optional[dict] = None,
        allow_missing: bool = False,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request failed: {url}") from exc

        if allow_missing and response.status_code == 404:
            return None
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise FetchError(f"Request failed: {url} ({response.status_code})") from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Response is not JSON: {url}") from exc


class ImageProbe:
    """Check whether an image URL can be displayed"""

    def __init__(self, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def __call__(self, url: str) -> bool:
        return self.loads(url)

    def loads(self, url: str) -> bool:
        """True when the URL answers with a successful status"""
        if not url.startswith(("http://", "https://")):
            return True
        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
            if response.status_code == 405:
                response = self.session.get(
                    url, timeout=self.timeout, allow_redirects=True, stream=True
                )
                response.close()
        except requests.RequestException as exc:
            logger.debug("Image probe failed for %s: %s", url, exc)
            return False
        logger.debug("Image probe %s -> %s", url, response.status_code)
        return response.status_code < 400
