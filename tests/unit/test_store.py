"""Unit tests for the content store: listings and articles."""

from namisite.content import ContentStore, MarkdownRenderer, collect_tags, filter_by_tag
from namisite.content.store import is_safe_slug, slug_from_filename
from namisite.core import Category


class TestHelpers:
    """Tests for slug helpers."""

    def test_slug_from_filename(self):
        assert slug_from_filename("server-rules.md") == "server-rules"
        assert slug_from_filename("notes.txt") == "notes.txt"

    def test_is_safe_slug(self):
        assert is_safe_slug("pvp")
        assert is_safe_slug("ルール")
        assert not is_safe_slug("")
        assert not is_safe_slug("../secret")
        assert not is_safe_slug("a/b")
        assert not is_safe_slug(".hidden")


class TestListEntries:
    """Tests for ContentStore.list_entries()."""

    def test_sorted_by_order_with_default(self, content_root, write_doc):
        """Orders [3, default, 1] list as 1, 3, default."""
        write_doc(content_root, "rules", "alpha", {"title": "A", "order": 3})
        write_doc(content_root, "rules", "beta", {"title": "B"})
        write_doc(content_root, "rules", "gamma", {"title": "C", "order": 1})

        entries = ContentStore(content_root).list_entries(Category.RULE)
        assert [e.slug for e in entries] == ["gamma", "alpha", "beta"]
        assert [e.order for e in entries] == [1, 3, 99]

    def test_ties_broken_by_slug(self, content_root, write_doc):
        """Equal orders list in slug order."""
        write_doc(content_root, "wiki", "zeta", {"order": 1})
        write_doc(content_root, "wiki", "alpha", {"order": 1})
        write_doc(content_root, "wiki", "mid", {"order": 1})

        entries = ContentStore(content_root).list_entries(Category.WIKI)
        assert [e.slug for e in entries] == ["alpha", "mid", "zeta"]

    def test_missing_directory_is_empty(self, content_root):
        """A category without a directory lists nothing."""
        assert ContentStore(content_root).list_entries(Category.NEWS) == []

    def test_missing_root_is_empty(self, tmp_path):
        assert ContentStore(tmp_path / "nowhere").list_entries(Category.RULE) == []

    def test_ignores_non_markdown(self, content_root, write_doc):
        """Only regular *.md files are listed."""
        write_doc(content_root, "wiki", "page", {"title": "Page"})
        (content_root / "wiki" / "notes.txt").write_text("x")
        (content_root / "wiki" / "draft.md.bak").write_text("x")
        (content_root / "wiki" / "folder.md").mkdir()

        entries = ContentStore(content_root).list_entries(Category.WIKI)
        assert [e.slug for e in entries] == ["page"]

    def test_ignores_dotfiles(self, content_root, write_doc):
        """Hidden files are neither listed nor resolvable."""
        write_doc(content_root, "wiki", "page", {"title": "Page"})
        write_doc(content_root, "wiki", ".draft", {"title": "Draft"})
        (content_root / "wiki" / ".md").write_text("x")

        entries = ContentStore(content_root).list_entries(Category.WIKI)
        assert [e.slug for e in entries] == ["page"]

    def test_every_listed_slug_resolves(self, populated_root, write_doc):
        """Each listing entry has a matching article."""
        write_doc(populated_root, "wiki", ".draft", {"title": "Draft"})
        store = ContentStore(populated_root)
        for category in Category:
            for entry in store.list_entries(category):
                assert store.get_article(category, entry.slug) is not None

    def test_title_falls_back_to_slug(self, content_root, write_doc):
        write_doc(content_root, "news", "launch", {"description": "Launch day"})
        entry = ContentStore(content_root).list_entries(Category.NEWS)[0]
        assert entry.title == "launch"
        assert entry.as_dict()["description"] == "Launch day"

    def test_extra_keys_pass_through(self, content_root, write_doc):
        """Unrecognized frontmatter keys reach the entry unchanged."""
        write_doc(content_root, "news", "launch", {"title": "Launch", "author": "nami", "pinned": True})
        data = ContentStore(content_root).list_entries(Category.NEWS)[0].as_dict()
        assert data["author"] == "nami"
        assert data["pinned"] is True

    def test_malformed_frontmatter_still_listed(self, content_root, write_doc):
        """A file with broken frontmatter lists with defaults."""
        write_doc(content_root, "wiki", "broken", body="---\ntitle: [oops\n---\nbody")
        entry = ContentStore(content_root).list_entries(Category.WIKI)[0]
        assert entry.title == "broken"
        assert entry.order == 99

    def test_round_trip_listing(self, content_root, write_doc):
        """Metadata {title: T, order: 5} lists with the filename slug."""
        write_doc(content_root, "rules", "basics", {"title": "T", "order": 5}, "# H\n\nhello")
        data = ContentStore(content_root).list_entries(Category.RULE)[0].as_dict()
        assert data["title"] == "T"
        assert data["order"] == 5
        assert data["slug"] == "basics"
        assert "contentHtml" not in data


class TestGetArticle:
    """Tests for ContentStore.get_article()."""

    def test_round_trip_article(self, content_root, write_doc):
        """The body renders with one anchored heading."""
        write_doc(content_root, "rules", "basics", {"title": "T", "order": 5}, "# H\n\nhello")
        article = ContentStore(content_root).get_article(Category.RULE, "basics")
        assert article is not None
        assert article.title == "T"
        assert article.content_html.count("<h1") == 1
        assert '<h1 id="h">H</h1>' in article.content_html

    def test_missing_article_is_none(self, content_root):
        """Absence is signalled with None, not an exception."""
        assert ContentStore(content_root).get_article(Category.WIKI, "nope") is None

    def test_missing_category_dir_is_none(self, tmp_path):
        assert ContentStore(tmp_path).get_article(Category.NEWS, "anything") is None

    def test_unsafe_slug_is_none(self, content_root, write_doc):
        """Slugs cannot escape the category directory."""
        write_doc(content_root, "rules", "ok", {"title": "OK"})
        (content_root / "secret.md").write_text("top secret")
        store = ContentStore(content_root)
        assert store.get_article(Category.RULE, "../secret") is None
        assert store.get_article(Category.RULE, "") is None

    def test_title_falls_back_to_slug(self, content_root, write_doc):
        write_doc(content_root, "wiki", "untitled", body="Just text.")
        article = ContentStore(content_root).get_article(Category.WIKI, "untitled")
        assert article.title == "untitled"
        assert article.as_dict()["title"] == "untitled"

    def test_uses_configured_renderer(self, content_root, write_doc):
        """The store renders with its renderer's raw-HTML policy."""
        write_doc(content_root, "wiki", "html", {"title": "HTML"}, "<b>bold</b> text\n")
        store = ContentStore(content_root, renderer=MarkdownRenderer(allow_raw_html=False))
        article = store.get_article(Category.WIKI, "html")
        assert "&lt;b&gt;" in article.content_html


class TestTagHelpers:
    """Tests for collect_tags() and filter_by_tag()."""

    def test_collect_and_filter(self, populated_root):
        entries = ContentStore(populated_root).list_entries(Category.WIKI)
        assert collect_tags(entries) == ["basics", "nation"]
        assert [e.slug for e in filter_by_tag(entries, "nation")] == ["nations"]
        assert len(filter_by_tag(entries, "basics")) == 2
        assert filter_by_tag(entries, None) == entries
        assert filter_by_tag(entries, "missing") == []
