"""
Blog API payload schemas
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class BlogPost(_CamelModel):
    """Article record as served by the blog API"""
    id: Optional[Union[int, str]] = None
    title: str
    slug: str = ""
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    featured_image: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PaginationInfo(_CamelModel):
    """Pagination block of a posts page"""
    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=0, ge=0)
    total_posts: int = Field(default=0, ge=0)
    has_next_page: bool = False
    has_previous_page: bool = False


class PostsPage(_CamelModel):
    """One page of posts with its pagination block"""
    posts: List[BlogPost] = Field(default_factory=list)
    pagination: Optional[PaginationInfo] = None
