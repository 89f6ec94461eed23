"""
Output Formatters
"""

import json
import logging
import os
from abc import ABC, abstractmethod

from ..domain.entities import ScrapeResult

logger = logging.getLogger(__name__)


class OutputFormatter(ABC):
    """Abstract base class for output formatters"""

    @abstractmethod
    def render(self, result: ScrapeResult) -> str:
        """Render a scrape result as text"""
        pass

    def save(self, result: ScrapeResult, filepath: str) -> bool:
        """Write the rendered result to filepath"""
        try:
            os.makedirs(os.path.dirname(filepath) if os.path.dirname(filepath) else '.', exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(self.render(result))
            return True
        except OSError as e:
            logger.error(f"Error saving file {filepath}: {e}")
            return False


class JsonOutputFormatter(OutputFormatter):
    """JSON output formatter, same shape as the /scrape response"""

    def render(self, result: ScrapeResult) -> str:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
