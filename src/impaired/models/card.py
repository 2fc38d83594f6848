"""Display cards for items.

An item's text is either a plain title or a JSON object describing a richer
card, e.g.::

    {"type": "ticket-card", "title": "Fix login",
     "subtitle": {"name": "#42", "href": "https://example.org/42"},
     "description": "Users cannot log in with SSO."}
"""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from impaired.constants import CARD_SIMPLE, CARD_TICKET, CARD_TYPES
from impaired.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ItemCard:
    """Presentation data for one item.

    Attributes
    ----------
    card_type : str
        One of ``CARD_TYPES``.
    title : str
        Main text of the card.
    subtitle : str, optional
        Secondary line (ticket cards).
    subtitle_href : str, optional
        Link target of the subtitle.
    description : str, optional
        Longer free text.
    """

    card_type: str
    title: str
    subtitle: Optional[str] = None
    subtitle_href: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_text(cls, text: str) -> "ItemCard":
        """Parse an item's text; anything but a card object becomes a simple title."""
        try:
            data = json.loads(text)
        except ValueError:
            return cls(card_type=CARD_SIMPLE, title=text)
        if not isinstance(data, dict) or "title" not in data:
            return cls(card_type=CARD_SIMPLE, title=text)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemCard":
        """Deserialize card from dictionary."""
        card_type = data.get("type", CARD_SIMPLE)
        if card_type not in CARD_TYPES:
            logger.warning("Unknown card type '%s', showing a simple card", card_type)
            card_type = CARD_SIMPLE

        subtitle = data.get("subtitle")
        subtitle_name = None
        subtitle_href = None
        if isinstance(subtitle, dict):
            subtitle_name = subtitle.get("name")
            subtitle_href = subtitle.get("href")
        elif subtitle is not None:
            subtitle_name = str(subtitle)

        return cls(
            card_type=card_type,
            title=str(data["title"]),
            subtitle=subtitle_name,
            subtitle_href=subtitle_href,
            description=data.get("description"),
        )

    @property
    def is_ticket(self) -> bool:
        return self.card_type == CARD_TICKET

    def to_dict(self) -> Dict[str, Any]:
        """Serialize card to dictionary."""
        data: Dict[str, Any] = {"type": self.card_type, "title": self.title}
        if self.subtitle is not None:
            data["subtitle"] = {"name": self.subtitle, "href": self.subtitle_href}
        if self.description is not None:
            data["description"] = self.description
        return data

    def plain_text(self) -> str:
        """Single-line rendering for terminals and list widgets."""
        text = self.title
        if self.subtitle:
            text = f"{text} ({self.subtitle})"
        return text
