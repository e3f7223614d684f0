"""Tests for profile README analysis."""

from github_profiler.analysis.readme import (
    analyze_profile_readme,
    extract_images,
    strip_markdown_formatting,
)


class TestStripMarkdown:
    """Tests for strip_markdown_formatting."""

    def test_heading_and_list_markers(self):
        """Test removal of leading markdown markers."""
        assert strip_markdown_formatting("## About me").strip() == "About me"
        assert strip_markdown_formatting("- item").strip() == "item"
        assert strip_markdown_formatting("> quoted").strip() == "quoted"

    def test_links_and_code(self):
        """Test that links keep their text and inline code keeps its content."""
        line = "See [my blog](https://example.com) and `make test`"

        assert strip_markdown_formatting(line) == "See my blog and make test"

    def test_images_and_html(self):
        """Test that images and HTML tags are dropped."""
        line = '![badge](https://img.shields.io/x.svg) <b>bold</b>'

        assert strip_markdown_formatting(line).split() == ["bold"]


class TestExtractImages:
    """Tests for image counting and alt text extraction."""

    def test_markdown_and_html_images(self):
        """Test both syntaxes, including images without alt text."""
        markdown = (
            "![Python](https://img/python.svg)\n"
            "![](https://img/blank.svg)\n"
            '<img src="https://img/go.svg" alt="Go" />\n'
            '<IMG src="https://img/stats.svg">\n'
        )

        count, alts = extract_images(markdown)

        assert count == 4
        assert alts == ["Python", "Go"]


class TestAnalyzeProfileReadme:
    """Tests for analyze_profile_readme."""

    def test_none(self):
        """Test a missing README."""
        readme = analyze_profile_readme(None)

        assert readme.style == "none"
        assert readme.markdown is None
        assert readme.plain_text is None

    def test_empty(self):
        """Test a blank README."""
        readme = analyze_profile_readme("  \n\n ")

        assert readme.style == "empty"
        assert readme.markdown == ""
        assert readme.plain_text == ""
        assert readme.text_excerpt is None

    def test_one_liner(self):
        """Test a single short line without images."""
        readme = analyze_profile_readme("# Hi, I'm Alice 👋")

        assert readme.style == "one_liner"
        assert readme.plain_text == "Hi, I'm Alice 👋"
        assert readme.text_line_count == 1

    def test_short_bio(self):
        """Test several lines of prose without images."""
        markdown = (
            "# Alice\n"
            "\n"
            "I build developer tools and maintain a few open source libraries.\n"
            "- Currently learning Rust\n"
        )

        readme = analyze_profile_readme(markdown)

        assert readme.style == "short_bio"
        assert readme.plain_text.splitlines() == [
            "Alice",
            "I build developer tools and maintain a few open source libraries.",
            "Currently learning Rust",
        ]

    def test_visual_dashboard(self):
        """Test a README dominated by images."""
        markdown = (
            "![stats](https://stats.example/alice)\n"
            "![langs](https://stats.example/langs)\n"
            "<img src='https://x/y.svg' alt='TypeScript'>\n"
            "Thanks for visiting\n"
        )

        readme = analyze_profile_readme(markdown)

        assert readme.style == "visual_dashboard"
        assert readme.image_count == 3
        assert readme.image_alt_texts == ("stats", "langs", "TypeScript")

    def test_mixed(self):
        """Test text plus a single image."""
        markdown = "# Alice\nBackend engineer\n![banner](https://x/banner.png)\n"

        readme = analyze_profile_readme(markdown)

        assert readme.style == "mixed"

    def test_long_single_line_is_mixed(self):
        """Test that an over-long single line is not a one-liner."""
        readme = analyze_profile_readme("x" * 200)

        assert readme.style == "mixed"

    def test_excerpt_truncated(self):
        """Test the 400-character excerpt."""
        markdown = "\n".join(f"line {i} " + "word " * 20 for i in range(20))

        readme = analyze_profile_readme(markdown)

        assert len(readme.text_excerpt) == 400
        assert readme.plain_text.startswith(readme.text_excerpt)
        assert readme.markdown == markdown

    def test_crlf_lines(self):
        """Test Windows line endings."""
        readme = analyze_profile_readme("first line here\r\nsecond line here")

        assert readme.text_line_count == 2
        assert "\r" not in readme.plain_text
