from __future__ import annotations

import re
from dataclasses import dataclass

IPV4_PATTERN = re.compile(r"\b(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})\b")


@dataclass
class Redactor:
    enabled: bool = True

    def redact_ip(self, ip: str) -> str:
        if not self.enabled:
            return ip
        parts = ip.split(".")
        if len(parts) == 4 and all(part.isdigit() for part in parts):
            return f"x.x.x.{parts[3]}"
        return ip

    def redact_text(self, text: str) -> str:
        """Mask every IPv4 address embedded in free text, e.g. error messages."""
        if not self.enabled:
            return text
        return IPV4_PATTERN.sub(lambda match: f"x.x.x.{match.group(4)}", text)
