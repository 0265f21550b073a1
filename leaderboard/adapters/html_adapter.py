"""Adapter for parsing the rendered HTML leaderboard table."""

import copy
import re

from bs4 import BeautifulSoup

from .base import BaseAdapter
from ..core.errors import ValidationError
from ..core.models import HtmlTable, RawColumn, RawRow


# Header cells without data-format-text get their format from a CSS class
CLASS_FORMATS = {
    'pos': 'position',
    'past_round_total': 'round-total',
}

# Sub-elements whose text never belongs in a cell value
HIDDEN_SELECTORS = (
    "span[style*='display: none']",
    'span.hidden',
    'div.affiliation',
)


class HtmlAdapter(BaseAdapter):
    """Parse the leaderboard table structure from the rendered HTML.

    Extracts the header columns (format, label, round name), one raw row
    per visible player/team row (id, name, member ids, affiliation, cell
    text, whether it sits below the cut line) and the cut-line text.

    Args:
        html: The HTML document. Blank input raises ValueError.
    """

    source_name = 'html'

    def __init__(self, html: str):
        super().__init__(html)
        self.soup = BeautifulSoup(html, 'html.parser')

    def parse(self) -> HtmlTable:
        """Parse the HTML and return columns, rows and cut text."""
        return HtmlTable(
            columns=self._parse_columns(),
            rows=self._parse_rows(),
            cut_text=self._parse_cut_text(),
        )

    # ─── Columns ────────────────────────────────────────────────────

    def _parse_columns(self) -> list[RawColumn]:
        header_row = self.soup.select_one('tr.header.thead')
        if header_row is None:
            return []

        return [
            RawColumn(
                format=self._column_format(th),
                label=self._column_label(th),
                round_name=self._column_round_name(th),
            )
            for th in header_row.find_all('th')
        ]

    @staticmethod
    def _column_format(th) -> str:
        """data-format-text if present, else synthesized from the CSS class, else 'text'."""
        fmt = th.get('data-format-text')
        if fmt and fmt.strip():
            return fmt

        for css_class in th.get('class') or []:
            if css_class in CLASS_FORMATS:
                return CLASS_FORMATS[css_class]

        return 'text'

    @staticmethod
    def _column_label(th) -> str:
        """Header text with <br> turned into spaces: 'Thru<br/>R2' -> 'Thru R2'."""
        th = copy.copy(th)
        for br in th.find_all('br'):
            br.replace_with(' ')
        return re.sub(r'\s+', ' ', th.get_text()).strip()

    @staticmethod
    def _column_round_name(th) -> str | None:
        round_name = th.get('data-name')
        if round_name and round_name.strip():
            return round_name
        return None

    # ─── Rows ───────────────────────────────────────────────────────

    def _parse_rows(self) -> list[RawRow]:
        rows = []
        cut_encountered = False

        for tr in self.soup.find_all('tr'):
            classes = tr.get('class') or []

            # Cut line marker: every row after it missed the cut
            if 'header' in classes and tr.select_one('td.cut_list_tr') is not None:
                cut_encountered = True
                continue

            if 'aggregate-row' not in classes:
                continue

            # Hidden and spacer rows
            if 'hidden' in classes:
                continue
            if 'height: 1px' in (tr.get('style') or ''):
                continue

            rows.append(RawRow(
                id=self._row_id(tr),
                name=tr.get('data-aggregate-name') or '',
                player_ids=self._row_player_ids(tr),
                affiliation=self._row_affiliation(tr),
                cells=[self._cell_value(td) for td in tr.find_all('td')],
                cut=cut_encountered,
            ))

        return rows

    @staticmethod
    def _row_id(tr):
        row_id = tr.get('data-aggregate-id')
        if row_id is None or not row_id.strip():
            raise ValidationError("Row missing required data-aggregate-id attribute")
        return row_id.strip()

    @staticmethod
    def _row_player_ids(tr) -> list[str]:
        ids = tr.get('data-member-ids')
        if not ids or not ids.strip():
            return []
        return [i.strip() for i in ids.split(',') if i.strip()]

    @staticmethod
    def _row_affiliation(tr):
        """None, a single string, or a list of strings for teams."""
        affiliations = [div.get_text().strip() for div in tr.select('div.affiliation')]
        if not affiliations:
            return None
        if len(affiliations) == 1:
            return affiliations[0]
        return affiliations

    @staticmethod
    def _cell_value(td) -> str:
        """Printable cell text, preferring div.score_to_print, without hidden parts."""
        td = copy.copy(td)
        for selector in HIDDEN_SELECTORS:
            for el in td.select(selector):
                el.decompose()

        score_div = td.select_one('div.score_to_print')
        text = (score_div or td).get_text()
        return text.strip()

    # ─── Cut line ───────────────────────────────────────────────────

    def _parse_cut_text(self) -> str | None:
        cut_cell = self.soup.select_one('tr.header td.cut_list_tr')
        if cut_cell is None:
            return None
        return cut_cell.get_text().strip()
