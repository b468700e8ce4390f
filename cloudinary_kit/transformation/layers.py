from __future__ import annotations

from abc import abstractmethod
from typing import Optional
from urllib.parse import quote
from pydantic import BaseModel, ConfigDict

# Characters left unescaped in overlay text: the URL fragment allowed set
# (unreserved characters are always kept by quote()).
FRAGMENT_SAFE = "!$&'()*+,;=:@/?"


def encode_fragment(text: str) -> str:
    return quote(text, safe=FRAGMENT_SAFE)

# -----------------------------
# Layers
# -----------------------------

class BaseLayer(BaseModel):
    """
    An overlay rendered as its own slash-delimited path segment.
    Abstract: subclasses supply serialized().
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def serialized(self) -> str:
        ...


class TextLayer(BaseLayer):
    """
    l_text:<font>:<text>[:<color>]
    font and color go in as given (e.g. "Arial_40", "co_rgb:ff0000");
    only the text is percent-encoded.
    """
    text: str
    font: str
    color: Optional[str] = None

    def serialized(self) -> str:
        params = ["l_text", self.font, encode_fragment(self.text)]
        if self.color is not None:
            params.append(self.color)
        return ":".join(params)
