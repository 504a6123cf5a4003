"""
engines/video.py

YouTube metadata via the public oEmbed endpoint (no API key needed).
"""

from typing import Optional

from engines.base import SearchEngine
from models import SourceMetadata, SourceType
from config import YOUTUBE_OEMBED_URL, YOUTUBE_SITE_NAME, UNKNOWN_AUTHOR


class YouTubeEngine(SearchEngine):
    """oEmbed gives us the title and the channel name, nothing else."""

    name = "YouTube"
    base_url = YOUTUBE_OEMBED_URL

    def get_by_id(self, url: str) -> Optional[SourceMetadata]:
        data = self._get_json(self.base_url, params={'url': url, 'format': 'json'})
        if not isinstance(data, dict):
            return None

        return SourceMetadata(
            title=data.get('title', ''),
            authors=[data.get('author_name') or UNKNOWN_AUTHOR],
            site_name=YOUTUBE_SITE_NAME,
            url=url,
            source_type=SourceType.VIDEO,
            source_engine=self.name,
        )
