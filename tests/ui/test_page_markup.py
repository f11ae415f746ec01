"""Tests for the HTML rendered by the UI pages."""
import pytest
from src.services.listing_service import EMPTY_STATE_MESSAGE
from src.ui.html_utils import card, html_block, text
from src.ui.landing_page import HOW_IT_WORKS, _hero_html, _step_card_html
from src.ui.layout import footer_html
from src.ui.registered_people_page import _render_empty_state, _render_people_table


class TestHtmlUtils:
    """Tests for html_utils helpers."""

    def test_html_block_strips_indentation(self):
        """Indented lines must not become Markdown code blocks."""
        html = html_block(
            """
                <div>
                    <p>Hi</p>
                </div>
            """
        )
        assert html == "<div>\n<p>Hi</p>\n</div>"

    def test_text_escapes(self):
        assert text("<b>&</b>") == "&lt;b&gt;&amp;&lt;/b&gt;"
        assert text(None) == ""

    def test_card_padding(self):
        assert 'padding: 0;' in card("<p>x</p>", padding="0")


class TestLandingMarkup:
    """Tests for landing page markup."""

    def test_hero_names_foundation(self):
        html = _hero_html("HopeRise Foundation")

        assert "HopeRise Foundation" in html
        assert "Top 10 Favorites" in html

    def test_three_steps(self):
        assert [step["title"] for step in HOW_IT_WORKS] == ["Register", "Download & Upload", "Get Selected"]

    def test_step_card_escapes_title(self):
        html = _step_card_html(HOW_IT_WORKS[1])
        assert "Download &amp; Upload" in html


class TestRegisteredPeopleMarkup:
    """Tests for the registered-people table."""

    @pytest.fixture
    def rows(self):
        return [
            {"#": 1, "Name": "Jane <Ann> Doe", "Age": 30, "Country": "Kenya", "Date": "1/1/2025", "Status": "Verified"},
            {"#": 2, "Name": "Sam Lee", "Age": 41, "Country": "Peru", "Date": "12/25/2024", "Status": "Verified"},
        ]

    def test_table_columns(self, rows):
        html = _render_people_table(rows)

        for column in ("#", "Name", "Age", "Country", "Date", "Status"):
            assert f"<th>{column}</th>" in html
        assert html.count("<tr>") == 3

    def test_names_escaped(self, rows):
        html = _render_people_table(rows)
        assert "Jane &lt;Ann&gt; Doe" in html

    def test_status_badge(self, rows):
        assert "Verified</span>" in _render_people_table(rows)

    def test_empty_state(self):
        assert EMPTY_STATE_MESSAGE in _render_empty_state()


def test_footer_year_and_name():
    html = footer_html("HopeRise Foundation", year=2025)
    assert "&copy; 2025 HopeRise Foundation" in html
