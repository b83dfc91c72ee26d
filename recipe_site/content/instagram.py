from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    image = "IMAGE"
    video = "VIDEO"
    carousel_album = "CAROUSEL_ALBUM"


class InstagramPost(BaseModel):
    id: str
    caption: str
    media_type: MediaType = MediaType.image
    media_url: str
    permalink: str
    timestamp: datetime
    username: str | None = None
    likes: int = 0
    comments: int = 0


class InstagramSettings(BaseModel):
    enabled: bool = True
    display_count: int = Field(default=6, ge=1, le=12)
    show_on_homepage: bool = True
    section_title: str = "Follow Us on Instagram"
    username: str = "deliciousrecipes"


def _post(id_: str, caption: str, slug: str, timestamp: str, likes: int, comments: int,
          media_type: MediaType = MediaType.image) -> InstagramPost:
    return InstagramPost(
        id=id_,
        caption=caption,
        media_type=media_type,
        media_url=f"/placeholder.svg?height=400&width=400&text={slug}",
        permalink=f"https://instagram.com/p/{slug}",
        timestamp=timestamp,
        username="deliciousrecipes",
        likes=likes,
        comments=comments,
    )


# Demo posts; the feed is a mock and never calls the Instagram API
MOCK_POSTS: list[InstagramPost] = [
    _post("1", "Fresh homemade pasta with basil and tomatoes. #pasta #homemade #italian",
          "pasta-dish", "2024-01-15T10:30:00Z", 247, 18),
    _post("2", "Behind the scenes: prepping ingredients for tonight's special. #prep #kitchenlife",
          "kitchen-prep", "2024-01-14T15:45:00Z", 189, 12),
    _post("3", "Perfect chocolate chip cookies fresh from the oven. #cookies #baking",
          "chocolate-cookies", "2024-01-13T12:20:00Z", 312, 25),
    _post("4", "Sunday brunch vibes with these fluffy pancakes. #brunch #pancakes",
          "sunday-pancakes", "2024-01-12T09:15:00Z", 156, 8),
    _post("5", "Fresh garden salad with herbs straight from our garden. #salad #garden",
          "garden-salad", "2024-01-11T14:30:00Z", 203, 15),
    _post("6", "Homemade pizza night! What's your favorite topping? #pizza #family",
          "pizza-night", "2024-01-10T18:00:00Z", 278, 32),
    _post("7", "Creamy mushroom risotto, swipe for the step-by-step. #risotto #comfort",
          "mushroom-risotto", "2024-01-09T19:20:00Z", 195, 14, MediaType.carousel_album),
    _post("8", "Fresh berry tart with vanilla custard. #berries #tart #dessert",
          "berry-tart", "2024-01-08T16:45:00Z", 234, 19),
    _post("9", "Grilled salmon with lemon herb butter, ready in 20 minutes. #salmon #quick",
          "grilled-salmon", "2024-01-07T18:30:00Z", 167, 11),
    _post("10", "Artisan sourdough bread fresh from the oven. #sourdough #baking",
          "sourdough-bread", "2024-01-06T08:15:00Z", 289, 23),
    _post("11", "Colourful veggie stir fry, quick and packed with flavour. #stirfry #healthy",
          "veggie-stirfry", "2024-01-05T17:00:00Z", 145, 9),
    _post("12", "Chocolate lava cake with vanilla ice cream. #chocolate #lavacake",
          "chocolate-lava", "2024-01-04T20:30:00Z", 321, 41, MediaType.video),
]


def get_feed(settings: InstagramSettings, posts: list[InstagramPost] | None = None) -> list[InstagramPost]:
    if not settings.enabled:
        return []
    posts = MOCK_POSTS if posts is None else posts
    return posts[:settings.display_count]
