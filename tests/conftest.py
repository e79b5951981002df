import pytest
from bs4 import BeautifulSoup

LESSON_URL = "https://www.example.com/learningenglish/english/features/6-minute-english/ep-240104"

LESSON_HTML = """<html>
<head>
<meta property="og:title" content="Learning English">
<meta property="og:image" content="https://example.com/og.jpg">
</head>
<body>
<div class="widget-heading"><h3>6 Minute English</h3></div>
<div class="widget-heading"><h3>Why do we love cats?</h3></div>
<div class="widget-bbcle-featuresubheader"><div class="details"><h3><b>Episode 240104</b> / 04 Jan 2024</h3></div></div>
<div class="widget-video"><img src="https://example.com/cats.jpg"></div>
<a class="download bbcle-download-extension-mp3" href="https://example.com/cats.mp3">Download</a>
<div class="text">
<h3>Introduction</h3>
<p>Cats have lived alongside humans for thousands of years.</p>
<h3>Vocabulary</h3>
<p><strong>domesticated</strong><br>tamed and kept as a pet<br><strong>aloof</strong><br>not friendly or interested</p>
<p><strong>TRANSCRIPT</strong></p>
<p>Note: This is not a word-for-word transcript.</p>
<p><strong>Neil</strong><br>Hello. This is 6 Minute English.</p>
<p><strong>Beth</strong><br>And I'm Beth. Cats are <strong>domesticated</strong>, aren't they?</p>
<p>Next time we'll be back with another topic.</p>
<p><strong>Neil</strong><br>This paragraph is after the end marker.</p>
</div>
</body>
</html>"""

EXPECTED_TRANSCRIPT = (
    "[SPEAKER]Neil[/SPEAKER]\n"
    "\n"
    "Hello. This is 6 Minute English.\n"
    "\n"
    "[SPEAKER]Beth[/SPEAKER]\n"
    "\n"
    "And I'm Beth. Cats are **domesticated**, aren't they?"
)


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def make_paragraph(inner_html: str):
    """Parse ``<p>inner_html</p>`` and return the <p> tag."""
    return make_soup(f"<p>{inner_html}</p>").p


@pytest.fixture
def lesson_html():
    return LESSON_HTML


@pytest.fixture
def lesson_soup():
    return make_soup(LESSON_HTML)
