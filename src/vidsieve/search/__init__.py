from vidsieve.search.base import VideoSearcher
from vidsieve.search.youtube import YouTubeSearcher

__all__ = [
    "VideoSearcher",
    "YouTubeSearcher",
]
