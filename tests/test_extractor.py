"""
Tests for HTML extraction.
"""

from analyzers.extractor import PageContent, extract_page_content


class TestExtractPageContent:
    """Tests for extract_page_content."""

    def test_extracts_basic_fields(self):
        html = """
        <html><head>
          <title>  Joe's Pizza | Lancaster  </title>
          <meta name="description" content=" Hand tossed pizza. ">
        </head><body>
          <h1>Best <em>Pizza</em> in Lancaster</h1>
          <h2>Menu</h2>
          <img src="a.jpg" alt="Pepperoni pizza">
          <img src="b.jpg" alt="">
          <img src="c.jpg">
          <p>Five words of body text.</p>
        </body></html>
        """
        content = extract_page_content(html)

        assert content.title == "Joe's Pizza | Lancaster"
        assert content.meta_description == "Hand tossed pizza."
        assert content.h1s == ("Best Pizza in Lancaster",)
        assert content.image_count == 3
        assert content.images_with_alt == 1

    def test_meta_name_is_case_insensitive(self):
        html = '<head><meta name="Description" content="Pizza and wings"></head>'
        assert extract_page_content(html).meta_description == "Pizza and wings"

    def test_word_count_ignores_scripts_and_styles(self):
        html = """
        <body>
          <script>var a = "not counted at all";</script>
          <style>p { color: red; }</style>
          <noscript>enable javascript please</noscript>
          <p>one two three</p>
          <div>four five</div>
        </body>
        """
        assert extract_page_content(html).word_count == 5

    def test_keeps_h1_order(self):
        html = "<body><h1>First</h1><p>x</p><h1>Second</h1></body>"
        assert extract_page_content(html).h1s == ("First", "Second")

    def test_empty_markup_returns_defaults(self):
        assert extract_page_content("") == PageContent()

    def test_malformed_markup_is_best_effort(self):
        html = "<html><head><title>Broken<body><h1>Unclosed <p>text <<>> &&"
        content = extract_page_content(html)
        assert isinstance(content, PageContent)

    def test_plain_text_document(self):
        content = extract_page_content("just some words here")
        assert content.title == ""
        assert content.word_count == 4
