import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO, Dict

from .exceptions import ConfigReadError

logger = logging.getLogger(__name__)


class ConfigReader:
    """Reads an Eclipse formatter profile export into a flat option mapping.

    Expected layout::

        <profiles version="21">
          <profile kind="CodeFormatterProfile" name="..." version="21">
            <setting id="org.eclipse.jdt.core.formatter.tabulation.char" value="space"/>
          </profile>
        </profiles>
    """

    def read(self, stream: BinaryIO) -> Dict[str, str]:
        if stream is None:
            raise ConfigReadError("No configuration stream given")
        try:
            root = ET.parse(stream).getroot()
        except ET.ParseError as e:
            raise ConfigReadError(f"Malformed formatter configuration: {e}") from e

        profiles = [root] if root.tag == "profile" else root.findall("profile")
        if not profiles:
            raise ConfigReadError("No <profile> tag found in config file")
        profile = next((p for p in profiles if p.get("kind") == "CodeFormatterProfile"), profiles[0])

        options: Dict[str, str] = {}
        for setting in profile.iter("setting"):
            key = setting.get("id")
            if not key:
                raise ConfigReadError("Found a <setting> without an id attribute")
            options[key] = setting.get("value", "")
        logger.debug("read %d option(s) from profile %r", len(options), profile.get("name"))
        return options
