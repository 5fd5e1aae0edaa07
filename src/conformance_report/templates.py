"""Loading report templates and filling their placeholders."""

import re
from pathlib import Path
from typing import Dict, Union

from .errors import TemplateLoadError
from .logging_config import get_logger

logger = get_logger(__name__)


class TemplateLoader:
    """Reads report templates from a directory.

    Each template is read once per loader; later loads return the cached
    text, which callers never modify.
    """

    def __init__(self, template_dir: Union[str, Path], encoding: str = "utf-8"):
        self.template_dir = Path(template_dir)
        self.encoding = encoding
        self._cache: Dict[str, str] = {}

    def load(self, template_name: str) -> str:
        """
        Return the full text of a template.

        Args:
            template_name: File name relative to the template directory

        Returns:
            Template text

        Raises:
            TemplateLoadError: If the file is missing, unreadable or cannot be decoded
        """
        if template_name in self._cache:
            return self._cache[template_name]

        template_path = self.template_dir / template_name
        try:
            with open(template_path, 'r', encoding=self.encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to load template {template_path}: {e}")
            raise TemplateLoadError(
                f"Could not read report template {template_path}: {e}", path=template_path
            ) from e

        logger.debug(f"Loaded template {template_path} ({len(content)} chars)")
        self._cache[template_name] = content
        return content


def substitute_placeholders(template: str, rows: str, report_name: str,
                            rows_marker: str, name_marker: str) -> str:
    """
    Replace every rows marker with `rows` and every name marker with `report_name`.

    Both replacements happen in one pass over the template. Inserted text is
    literal and not scanned again, so rows containing a marker stay intact.
    """
    replacements = {rows_marker: rows, name_marker: report_name}
    # Longest marker first so a marker containing the other one wins
    markers = sorted(replacements, key=len, reverse=True)
    pattern = re.compile('|'.join(re.escape(marker) for marker in markers))
    return pattern.sub(lambda match: replacements[match.group(0)], template)
