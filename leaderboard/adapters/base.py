"""Abstract base adapter for parsing one leaderboard source document."""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    # Name used in the "... is required" error, e.g. 'html' or 'json'
    source_name = 'document'

    def __init__(self, document: str):
        if document is None or not str(document).strip():
            raise ValueError(f"{self.source_name} is required")
        self.document = document

    @abstractmethod
    def parse(self):
        """Parse the document and return its typed record.

        HtmlAdapter returns an HtmlTable (columns, rows, cut_text).
        JsonAdapter returns a ScoringPayload (name, adjusted, rounds, aggregates).
        """
        pass
