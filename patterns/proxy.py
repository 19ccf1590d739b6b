"""
Proxy pattern: a caching stand-in for a slow video service.
"""
from abc import ABC, abstractmethod
from copy import deepcopy
from collections import Counter
from typing import Any, Dict, Mapping, Optional, Tuple
from config.config_manager import get_config
from config.presets import ConfigPresets
from infrastructure.cache import LRUCache
from utils.logging_config import get_logger
from utils.exceptions import VideoNotFoundError

logger = get_logger(__name__)


class ThirdPartyYouTubeLib(ABC):
    """Capability shared by the real service and its proxy."""

    @abstractmethod
    def list_videos(self) -> Tuple[str, ...]:
        """Return the ids of all available videos."""
        pass

    @abstractmethod
    def get_video_info(self, video_id: str) -> Dict[str, Any]:
        pass


class ThirdPartyYouTubeClass(ThirdPartyYouTubeLib):
    """
    In-memory video service.

    Stands in for the remote API; ``calls`` counts how often each operation
    was reached so callers can see when a proxy delegated.
    """

    def __init__(self, catalog: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._catalog: Dict[str, Dict[str, Any]] = {
            video_id: deepcopy(dict(info)) for video_id, info in (catalog or {}).items()
        }
        self.calls: Counter = Counter()
        self.logger = get_logger(self.__class__.__name__)

    def list_videos(self) -> Tuple[str, ...]:
        self.calls['list_videos'] += 1
        self.logger.info("Fetching video list from service")
        return tuple(self._catalog)

    def get_video_info(self, video_id: str) -> Dict[str, Any]:
        self.calls['get_video_info'] += 1
        self.logger.info(f"Fetching info for video {video_id}")
        if video_id not in self._catalog:
            raise VideoNotFoundError(
                f"No video with id {video_id!r}",
                details={'video_id': video_id}
            )
        return dict(deepcopy(self._catalog[video_id]), id=video_id)


class CachedYouTubeClass(ThirdPartyYouTubeLib):
    """
    Caching proxy for any :class:`ThirdPartyYouTubeLib`.

    The video list is fetched at most once until ``reset()``; video info is
    kept per id in an LRU cache. Results are returned as immutable tuples or
    deep copies, so callers never share mutable state with the service.
    """

    def __init__(self, service: ThirdPartyYouTubeLib, info_cache_capacity: Optional[int] = None):
        if info_cache_capacity is None:
            info_cache_capacity = get_config(
                'proxy.info_cache_capacity',
                ConfigPresets.defaults()['proxy']['info_cache_capacity']
            )
        self._service = service
        self._cached_videos: Optional[Tuple[str, ...]] = None
        self._info_cache = LRUCache(capacity=info_cache_capacity)
        self.logger = get_logger(self.__class__.__name__)

    @property
    def service(self) -> ThirdPartyYouTubeLib:
        return self._service

    def list_videos(self) -> Tuple[str, ...]:
        if self._cached_videos is None:
            self._cached_videos = tuple(self._service.list_videos())
            self.logger.debug(f"Cached list of {len(self._cached_videos)} videos")
        else:
            self.logger.debug("Serving video list from cache")
        return self._cached_videos

    def get_video_info(self, video_id: str) -> Dict[str, Any]:
        info = self._info_cache.get(video_id)
        if info is None:
            info = self._service.get_video_info(video_id)
            self._info_cache.set(video_id, deepcopy(info))
            self.logger.debug(f"Cached info for video {video_id}")
        return deepcopy(info)

    def reset(self):
        """Drop everything cached; the next calls delegate again."""
        self._cached_videos = None
        self._info_cache.clear()
        self.logger.info("Cache invalidated")

    def cache_stats(self) -> dict:
        stats = self._info_cache.stats()
        stats['videos_cached'] = self._cached_videos is not None
        return stats


class YouTubeManager:
    """Client code that works with the service or its proxy alike."""

    def __init__(self, service: ThirdPartyYouTubeLib):
        self.service = service

    def render_video_page(self, video_id: str) -> str:
        info = self.service.get_video_info(video_id)
        return f"{info.get('title', video_id)} ({video_id})"

    def render_list_panel(self) -> str:
        return "\n".join(self.service.list_videos())
