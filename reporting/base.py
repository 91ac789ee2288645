"""
Base renderer interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from biodata.document import BiodataDocument


@dataclass
class RenderedBiodata:
    """A finished biodata PDF plus which sections made it onto the page."""
    content: bytes
    renderer: str
    filename: str
    placed_sections: List[str] = field(default_factory=list)
    dropped_sections: List[str] = field(default_factory=list)

    media_type: str = "application/pdf"


class BiodataRenderer(ABC):
    """Abstract base class for biodata PDF back-ends."""

    name: str = ""

    @abstractmethod
    def render(self, document: BiodataDocument) -> RenderedBiodata:
        """
        Draw a planned biodata document onto a single A4 page.

        Args:
            document: Render plan from build_document. Renderers draw its
                sections as given and never re-select content.

        Returns:
            RenderedBiodata with the PDF bytes.
        """
        pass
