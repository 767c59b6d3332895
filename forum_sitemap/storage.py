"""
Local file storage for generated sitemaps.
"""
from pathlib import Path
from typing import Any, Dict, Optional

from .interfaces import Logger
from .logging import log_info


class LocalFileStorage:
    """Local file system storage provider"""

    def __init__(self, base_path: str = ".", logger: Optional[Logger] = None):
        self.base_path = Path(base_path)
        self.logger = logger

    def store(self, content: str, key: str) -> Dict[str, Any]:
        """Write content to base_path/key, creating parent directories"""
        file_path = self.base_path / key
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)

        log_info(self.logger, f"Sitemap stored to local file: {file_path}")
        return {
            "key": key,
            "file_path": str(file_path),
            "size": len(content.encode('utf-8')),
        }
